"""Instantiation members: private constructor and the static ``builder()`` factory."""

from __future__ import annotations

from buildergen.models import BuilderContext, CodeBlock
from buildergen.rules.base import MemberRule


class PrivateConstructorRule(MemberRule):
    """Builders are only created through ``builder()``."""

    priority = 20

    def get_id(self) -> str:
        return "member.private_constructor"

    def get_name(self) -> str:
        return "Private Constructor"

    def applies(self, context: BuilderContext) -> bool:
        return True

    def generate(self, context: BuilderContext) -> list[CodeBlock]:
        name = context.settings.builder_class_name
        return [self.block([f"{context.indent()}private {name}() {{}}"])]


class BuilderFactoryRule(MemberRule):
    priority = 30

    def get_id(self) -> str:
        return "member.factory"

    def get_name(self) -> str:
        return "Static Factory"

    def applies(self, context: BuilderContext) -> bool:
        return True

    def generate(self, context: BuilderContext) -> list[CodeBlock]:
        name = context.settings.builder_class_name
        pad, body = context.indent(), context.indent(2)
        return [self.block([
            f"{pad}public static {name} builder() {{",
            f"{body}return new {name}();",
            f"{pad}}}",
        ])]
