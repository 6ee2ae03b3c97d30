"""Fluent configuration methods and the ``but()`` copy method."""

from __future__ import annotations

from buildergen.core.naming import fluent_method_name
from buildergen.models import BuilderContext, CodeBlock
from buildergen.rules.base import MemberRule


class FluentMethodsRule(MemberRule):
    """One ``<prefix><Name>(T name)`` method per property, returning ``this``."""

    priority = 40
    dependencies = ["member.fields"]

    def get_id(self) -> str:
        return "member.fluent_methods"

    def get_name(self) -> str:
        return "Fluent Methods"

    def applies(self, context: BuilderContext) -> bool:
        return len(context.properties) > 0

    def generate(self, context: BuilderContext) -> list[CodeBlock]:
        builder = context.settings.builder_class_name
        prefix = context.settings.method_prefix
        pad, body = context.indent(), context.indent(2)

        blocks: list[CodeBlock] = []
        for p in context.properties:
            method = fluent_method_name(prefix, p.name)
            blocks.append(self.block([
                f"{pad}public {builder} {method}({p.type_display_name} {p.name}) {{",
                f"{body}this.{p.name} = {p.name};",
                f"{body}return this;",
                f"{pad}}}",
            ]))
        return blocks


class ButMethodRule(MemberRule):
    """
    ``but()`` returns a fresh builder carrying a copy of the current state,
    so a common configuration can be varied without touching the original.
    """

    priority = 50
    dependencies = ["member.factory", "member.fluent_methods"]

    def get_id(self) -> str:
        return "member.but"

    def get_name(self) -> str:
        return "But Method"

    def applies(self, context: BuilderContext) -> bool:
        return context.settings.has_but_method

    def generate(self, context: BuilderContext) -> list[CodeBlock]:
        builder = context.settings.builder_class_name
        prefix = context.settings.method_prefix
        pad, body, chain = context.indent(), context.indent(2), context.indent(3)

        lines = [f"{pad}public {builder} but() {{"]
        if not context.properties:
            lines.append(f"{body}return builder();")
        else:
            lines.append(f"{body}return builder()")
            lines.extend(
                f"{chain}.{fluent_method_name(prefix, p.name)}({p.name})"
                for p in context.properties
            )
            lines[-1] += ";"
        lines.append(f"{pad}}}")
        return [self.block(lines)]
