"""Unit tests for the rule registry."""

import pytest

from buildergen.core.errors import UnsupportedCombinationError
from buildergen.core.registry import RuleRegistry, create_default_registry
from buildergen.models import (
    BuilderContext,
    CodeBlock,
    GenerationSettings,
    RenderConfig,
    ViaConstructor,
    ViaSetters,
)
from buildergen.rules.base import MemberRule


class StubRule(MemberRule):

    def __init__(self, rule_id, priority=100, dependencies=None, applies=True):
        self._id = rule_id
        self.priority = priority
        self.dependencies = dependencies or []
        self._applies = applies

    def get_id(self):
        return self._id

    def get_name(self):
        return self._id.title()

    def applies(self, context):
        return self._applies

    def generate(self, context):
        return [CodeBlock(rule_id=self._id, lines=[self._id])]


def context_for(metadata, config=None, **kwargs):
    return BuilderContext(
        metadata=metadata,
        settings=GenerationSettings(builder_class_name="TheBuilder", **kwargs),
        config=config or RenderConfig(),
    )


class TestRuleRegistry:

    def test_register_and_lookup(self):
        registry = RuleRegistry()
        rule = StubRule("a")
        registry.register(rule)

        assert registry.get_rule("a") is rule
        assert registry.list_rules() == [rule]

        registry.unregister("a")
        assert registry.get_rule("a") is None

    def test_sorted_by_priority(self, point):
        registry = RuleRegistry()
        registry.register(StubRule("late", priority=90))
        registry.register(StubRule("early", priority=10))

        ids = [r.get_id() for r in registry.get_applicable_rules(context_for(point))]
        assert ids == ["early", "late"]

    def test_dependencies_run_first(self, point):
        registry = RuleRegistry()
        registry.register(StubRule("dependent", priority=10, dependencies=["base"]))
        registry.register(StubRule("base", priority=50))

        ids = [r.get_id() for r in registry.get_applicable_rules(context_for(point))]
        assert ids == ["base", "dependent"]

    def test_non_applicable_rules_are_dropped(self, point):
        registry = RuleRegistry()
        registry.register(StubRule("on"))
        registry.register(StubRule("off", applies=False))

        ids = [r.get_id() for r in registry.get_applicable_rules(context_for(point))]
        assert ids == ["on"]

    def test_enabled_and_disabled_rules(self, point):
        registry = RuleRegistry()
        for rid in ("a", "b", "c"):
            registry.register(StubRule(rid))

        enabled = context_for(point, RenderConfig(enabled_rules=["a", "b"]))
        assert [r.get_id() for r in registry.get_applicable_rules(enabled)] == ["a", "b"]

        disabled = context_for(point, RenderConfig(disabled_rules=["b"]))
        assert [r.get_id() for r in registry.get_applicable_rules(disabled)] == ["a", "c"]

    def test_switched_off_dependency_is_unsupported(self, point):
        registry = RuleRegistry()
        registry.register(StubRule("dependent", dependencies=["base"]))
        registry.register(StubRule("base"))

        for config in (
            RenderConfig(disabled_rules=["base"]),
            RenderConfig(enabled_rules=["dependent"]),
        ):
            with pytest.raises(UnsupportedCombinationError, match="base"):
                registry.get_applicable_rules(context_for(point, config))

    def test_unregistered_dependency_is_unsupported(self, point):
        registry = RuleRegistry()
        registry.register(StubRule("dependent", dependencies=["missing"]))

        with pytest.raises(UnsupportedCombinationError):
            registry.get_applicable_rules(context_for(point))

    def test_dependency_that_does_not_apply_is_fine(self, point):
        registry = RuleRegistry()
        registry.register(StubRule("dependent", dependencies=["base"]))
        registry.register(StubRule("base", applies=False))

        ids = [r.get_id() for r in registry.get_applicable_rules(context_for(point))]
        assert ids == ["dependent"]

    def test_switched_off_rule_that_does_not_apply_needs_nothing(self, point):
        registry = RuleRegistry()
        registry.register(StubRule("dependent", dependencies=["base"], applies=False))
        registry.register(StubRule("base"))
        registry.register(StubRule("other"))

        config = RenderConfig(disabled_rules=["base"])
        ids = [r.get_id() for r in registry.get_applicable_rules(context_for(point, config))]
        assert ids == ["other"]


class TestDefaultRegistry:

    def build_rules(self, context):
        registry = create_default_registry()
        return [
            r.get_id() for r in registry.get_applicable_rules(context)
            if r.get_id().startswith("build.")
        ]

    def test_exactly_one_build_rule_per_strategy(self, person, money):
        assert self.build_rules(context_for(person)) == ["build.direct"]
        assert self.build_rules(context_for(
            person, population=ViaSetters(setters=["setAge"]),
        )) == ["build.setters"]
        assert self.build_rules(context_for(
            person, population=ViaConstructor(signature="Person()"),
        )) == ["build.constructor"]
        assert self.build_rules(context_for(
            money, population=ViaSetters(setters=["setAmount"]),
        )) == ["build.record"]

    def test_all_rules_listed(self):
        ids = {r.get_id() for r in create_default_registry().list_rules()}
        assert ids == {
            "member.fields", "member.private_constructor", "member.factory",
            "member.fluent_methods", "member.but",
            "build.record", "build.constructor", "build.setters", "build.direct",
        }

    def test_but_needs_factory_and_fluent_methods(self, point):
        registry = create_default_registry()
        for disabled in ("member.factory", "member.fluent_methods"):
            context = context_for(
                point, RenderConfig(disabled_rules=[disabled]), has_but_method=True,
            )
            with pytest.raises(UnsupportedCombinationError, match=disabled):
                registry.get_applicable_rules(context)

    def test_factory_can_go_without_but(self, point):
        registry = create_default_registry()
        context = context_for(point, RenderConfig(disabled_rules=["member.factory"]))
        ids = [r.get_id() for r in registry.get_applicable_rules(context)]
        assert "member.factory" not in ids
        assert "build.direct" in ids

    def test_fluent_and_build_methods_need_fields(self, point):
        registry = create_default_registry()
        context = context_for(point, RenderConfig(disabled_rules=["member.fields"]))
        with pytest.raises(UnsupportedCombinationError, match="member.fields"):
            registry.get_applicable_rules(context)
