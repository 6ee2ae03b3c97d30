"""Builder state: one private field per property."""

from __future__ import annotations

from buildergen.models import BuilderContext, CodeBlock
from buildergen.rules.base import MemberRule


class BuilderFieldsRule(MemberRule):
    """Mirrors each field (or record component) as a private builder field."""

    priority = 10

    def get_id(self) -> str:
        return "member.fields"

    def get_name(self) -> str:
        return "Builder Fields"

    def applies(self, context: BuilderContext) -> bool:
        return len(context.properties) > 0

    def generate(self, context: BuilderContext) -> list[CodeBlock]:
        pad = context.indent()
        return [self.block([
            f"{pad}private {p.type_display_name} {p.name};"
            for p in context.properties
        ])]
