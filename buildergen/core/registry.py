"""Rule registry: stores and resolves builder member rules."""

from __future__ import annotations

from buildergen.core.errors import UnsupportedCombinationError
from buildergen.models.context import BuilderContext
from buildergen.models.parameters import RenderConfig
from buildergen.rules.base import MemberRule


class RuleRegistry:
    """
    Central registry for all member rules.

    Rules are registered at startup. During generation, the registry
    returns the applicable rules sorted by priority with dependencies
    resolved.
    """

    def __init__(self) -> None:
        self._rules: dict[str, MemberRule] = {}

    def register(self, rule: MemberRule) -> None:
        """Register a member rule."""
        self._rules[rule.get_id()] = rule

    def unregister(self, rule_id: str) -> None:
        """Remove a rule from the registry."""
        self._rules.pop(rule_id, None)

    def get_rule(self, rule_id: str) -> MemberRule | None:
        return self._rules.get(rule_id)

    def list_rules(self) -> list[MemberRule]:
        """Return all registered rules."""
        return list(self._rules.values())

    def enabled_rules(self, config: RenderConfig) -> list[MemberRule]:
        """Registered rules left switched on by ``enabled_rules``/``disabled_rules``."""
        return [
            r for r in self._rules.values()
            if (not config.enabled_rules or r.get_id() in config.enabled_rules)
            and r.get_id() not in config.disabled_rules
        ]

    def get_applicable_rules(self, context: BuilderContext) -> list[MemberRule]:
        """
        Return rules that apply to the given context, dependencies first,
        otherwise by priority.

        Raises ``UnsupportedCombinationError`` when an applicable rule
        depends on a rule that is switched off or not registered: the
        member it emits would reference code that is never generated.
        A dependency that is enabled but does not apply (no fluent methods
        for a class without fields, say) is fine.
        """
        enabled = self.enabled_rules(context.config)
        enabled_ids = {r.get_id() for r in enabled}
        applicable = sorted(
            (r for r in enabled if r.applies(context)),
            key=lambda r: r.priority,
        )

        for rule in applicable:
            missing = [d for d in rule.dependencies if d not in enabled_ids]
            if missing:
                raise UnsupportedCombinationError(
                    f"Rule '{rule.get_id()}' needs {', '.join(missing)}, "
                    f"which the render configuration leaves out."
                )

        return self._resolve_order(applicable)

    def _resolve_order(self, rules: list[MemberRule]) -> list[MemberRule]:
        """Depth-first: every applicable dependency lands before its dependents."""
        by_id = {r.get_id(): r for r in rules}
        placed: set[str] = set()
        ordered: list[MemberRule] = []

        def place(rule: MemberRule) -> None:
            if rule.get_id() in placed:
                return
            placed.add(rule.get_id())
            for dep in rule.dependencies:
                if dep in by_id:
                    place(by_id[dep])
            ordered.append(rule)

        for rule in rules:
            place(rule)
        return ordered


def create_default_registry() -> RuleRegistry:
    """Create a registry with all standard member rules."""
    from buildergen.rules.members.fields import BuilderFieldsRule
    from buildergen.rules.members.factory import PrivateConstructorRule, BuilderFactoryRule
    from buildergen.rules.members.fluent import FluentMethodsRule, ButMethodRule
    from buildergen.rules.build.record import RecordBuildRule
    from buildergen.rules.build.constructor import ConstructorBuildRule
    from buildergen.rules.build.setters import SetterBuildRule
    from buildergen.rules.build.direct import DirectFieldBuildRule

    registry = RuleRegistry()
    for rule in (
        BuilderFieldsRule(),
        PrivateConstructorRule(),
        BuilderFactoryRule(),
        FluentMethodsRule(),
        ButMethodRule(),
        RecordBuildRule(),
        ConstructorBuildRule(),
        SetterBuildRule(),
        DirectFieldBuildRule(),
    ):
        registry.register(rule)
    return registry
