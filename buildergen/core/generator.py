"""Main builder text generator: orchestrates analysis and rule execution."""

from __future__ import annotations

from buildergen.core.analyzer import MetadataAnalyzer
from buildergen.core.errors import UnsupportedCombinationError
from buildergen.core.registry import RuleRegistry, create_default_registry
from buildergen.models import (
    BuilderContext, ClassMetadata, GeneratedBuilder, GenerationSettings, RenderConfig,
)
from buildergen.rules.build.base import BuildMethodRule
from buildergen.utils.logger import get_logger

logger = get_logger(__name__)


class BuilderTextGenerator:
    """
    Stateless builder generator.

    Takes class metadata + settings, runs analysis, executes applicable
    rules, and returns the source text of the builder type. Nothing is
    written anywhere; insertion is the caller's concern.
    """

    def __init__(self, registry: RuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()
        self.analyzer = MetadataAnalyzer()

    def generate(
        self,
        metadata: ClassMetadata,
        settings: GenerationSettings,
        config: RenderConfig | None = None,
    ) -> GeneratedBuilder:
        if config is None:
            config = RenderConfig()

        self._check_supported(metadata, settings)

        context = BuilderContext(
            metadata=metadata,
            settings=settings,
            config=config,
        )

        # Analysis phase
        self.analyzer.analyze(context)

        # Generation phase: run applicable rules
        rules = self.registry.get_applicable_rules(context)
        if not any(isinstance(r, BuildMethodRule) for r in rules):
            raise UnsupportedCombinationError(
                f"No build() rule is enabled for {metadata.name}."
            )
        logger.debug(
            "Rendering %s for %s with rules: %s",
            settings.builder_class_name,
            metadata.name,
            ", ".join(r.get_id() for r in rules),
        )
        for rule in rules:
            context.add_blocks(rule.generate(context))

        return GeneratedBuilder(
            class_name=settings.builder_class_name,
            text=self._render(context),
            blocks=context.blocks,
            warnings=context.warnings,
        )

    def _check_supported(self, metadata: ClassMetadata, settings: GenerationSettings) -> None:
        if metadata.is_interface:
            raise UnsupportedCombinationError(
                f"Cannot generate a builder for interface {metadata.name}."
            )
        if settings.builder_class_name == metadata.name:
            raise UnsupportedCombinationError(
                f"Builder class name '{settings.builder_class_name}' "
                f"clashes with the target class name."
            )

    def _render(self, context: BuilderContext) -> str:
        modifier = "static class" if context.settings.is_inner_builder else "class"
        header = f"public {modifier} {context.settings.builder_class_name} {{"
        body = "\n\n".join(block.text for block in context.blocks if block.lines)
        if not body:
            return f"{header}\n}}"
        return f"{header}\n{body}\n}}"
