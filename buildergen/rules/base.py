"""Abstract base class for all builder member rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each emits one kind of builder member
- Composable: multiple rules run in sequence via the registry
- Conditional: each rule decides if it applies to the current context
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from buildergen.models.context import BuilderContext
from buildergen.models.output import CodeBlock


class MemberRule(ABC):
    """
    Base class for all member rules.

    Subclasses implement `applies()` and `generate()`.
    The generator queries the registry, filters by `applies()`,
    sorts by `priority`, and calls `generate()` in order. Blocks
    appear in the builder body in that same order.
    """

    # Lower priority = emitted first. Default 100.
    priority: int = 100

    # IDs of rules that must run before this one.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'member.fields')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Builder Fields')."""
        ...

    @abstractmethod
    def applies(self, context: BuilderContext) -> bool:
        """Return True if this rule should run for the given context."""
        ...

    @abstractmethod
    def generate(self, context: BuilderContext) -> list[CodeBlock]:
        """
        Emit code blocks for the given context.

        The context provides metadata, settings, and the analysis results
        (properties, instance name, selected constructor).
        """
        ...

    def block(self, lines: list[str]) -> CodeBlock:
        return CodeBlock(rule_id=self.get_id(), lines=lines)
