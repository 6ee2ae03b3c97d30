"""Record targets: canonical constructor, components in declaration order."""

from __future__ import annotations

from buildergen.models import BuilderContext
from buildergen.rules.build.base import BuildMethodRule, positional_new


class RecordBuildRule(BuildMethodRule):
    """Population strategy is irrelevant for records and is ignored."""

    def get_id(self) -> str:
        return "build.record"

    def get_name(self) -> str:
        return "Record Build"

    def applies(self, context: BuilderContext) -> bool:
        return context.metadata.is_record

    def body(self, context: BuilderContext) -> list[str]:
        return positional_new(context, [p.name for p in context.properties])
