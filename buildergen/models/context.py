"""Builder context: accumulates state during one generation pass."""

from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, Field

from .metadata import BuilderProperty, ClassMetadata, ConstructorSignature
from .output import CodeBlock
from .parameters import RenderConfig
from .settings import GenerationSettings


class BuilderContext(BaseModel):
    """
    Holds all state during a single builder generation pass.

    The analyzer fills in derived data (properties, instance name,
    selected constructor). Rules add code blocks.
    The generator orchestrates the flow.
    """
    # Input
    metadata: ClassMetadata
    settings: GenerationSettings
    config: RenderConfig = Field(default_factory=RenderConfig)

    # Analysis results (populated by the analyzer)
    properties: list[BuilderProperty] = []
    instance_name: str = ""
    constructor: Optional[ConstructorSignature] = None

    # Output (populated by rules)
    blocks: list[CodeBlock] = []
    warnings: list[str] = []

    def add_blocks(self, blocks: list[CodeBlock]) -> None:
        self.blocks.extend(blocks)

    def warn(self, warning: str) -> None:
        if warning not in self.warnings:
            self.warnings.append(warning)

    def indent(self, level: int = 1) -> str:
        return self.config.indent * level
