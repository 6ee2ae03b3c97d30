"""Metadata analysis: derives what the rules render from."""

from __future__ import annotations

from buildergen.core.naming import decapitalize
from buildergen.models import (
    BuilderContext, BuilderProperty, ConstructorSignature, ViaConstructor,
)


class MetadataAnalyzer:
    """Resolves builder properties, the local instance name and the chosen constructor."""

    def analyze(self, context: BuilderContext) -> None:
        """Run all analysis passes and populate the context."""
        context.properties = self._collect_properties(context)
        context.instance_name = decapitalize(context.metadata.name)
        context.constructor = self._locate_constructor(context)

    def _collect_properties(self, context: BuilderContext) -> list[BuilderProperty]:
        """Record components for records, non-static fields otherwise."""
        metadata = context.metadata
        if metadata.is_record:
            return [
                BuilderProperty(name=c.name, type_display_name=c.type_display_name)
                for c in metadata.record_components
            ]
        return [
            BuilderProperty(name=f.name, type_display_name=f.type_display_name)
            for f in metadata.instance_fields
        ]

    def _locate_constructor(self, context: BuilderContext) -> ConstructorSignature | None:
        population = context.settings.population
        if context.metadata.is_record or not isinstance(population, ViaConstructor):
            return None
        return context.metadata.find_constructor(population.signature)
