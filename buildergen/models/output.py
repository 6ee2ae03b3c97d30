"""Generated builder output models."""

from __future__ import annotations
from pydantic import BaseModel


CONSTRUCTOR_NOT_FOUND = "ConstructorNotFound"


class CodeBlock(BaseModel):
    """One member of the builder body, already indented one level."""
    rule_id: str
    lines: list[str]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class GeneratedBuilder(BaseModel):
    """The rendered builder type."""
    class_name: str
    text: str
    blocks: list[CodeBlock] = []
    warnings: list[str] = []

    @property
    def degraded(self) -> bool:
        return bool(self.warnings)
