"""Shared shape of the terminal ``build()`` method.

Exactly one build rule applies to any context; the strategies are
mutually exclusive on the record flag and the population strategy.
"""

from __future__ import annotations
from abc import abstractmethod

from buildergen.models import BuilderContext, CodeBlock
from buildergen.rules.base import MemberRule


class BuildMethodRule(MemberRule):
    """Wraps a strategy-specific body in ``public T build() { ... }``."""

    priority = 90
    dependencies = ["member.fields"]

    def generate(self, context: BuilderContext) -> list[CodeBlock]:
        target = context.metadata.name
        pad = context.indent()
        lines = [f"{pad}public {target} build() {{"]
        lines.extend(self.body(context))
        lines.append(f"{pad}}}")
        return [self.block(lines)]

    @abstractmethod
    def body(self, context: BuilderContext) -> list[str]:
        """Statements of the build method, indented two levels."""
        ...


def positional_new(context: BuilderContext, arguments: list[str]) -> list[str]:
    """``return new T(a, b);`` with one argument per line."""
    target = context.metadata.name
    body, arg = context.indent(2), context.indent(3)
    if not arguments:
        return [f"{body}return new {target}();"]
    lines = [f"{body}return new {target}("]
    lines.extend(
        f"{arg}{name}," if i < len(arguments) - 1 else f"{arg}{name}"
        for i, name in enumerate(arguments)
    )
    lines.append(f"{body});")
    return lines
