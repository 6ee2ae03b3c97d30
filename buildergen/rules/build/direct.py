"""Default build: assign every builder field straight onto a no-arg instance."""

from __future__ import annotations

from buildergen.models import BuilderContext, DirectFields
from buildergen.rules.build.base import BuildMethodRule


class DirectFieldBuildRule(BuildMethodRule):

    def get_id(self) -> str:
        return "build.direct"

    def get_name(self) -> str:
        return "Direct Field Build"

    def applies(self, context: BuilderContext) -> bool:
        return (
            not context.metadata.is_record
            and isinstance(context.settings.population, DirectFields)
        )

    def body(self, context: BuilderContext) -> list[str]:
        target = context.metadata.name
        instance = context.instance_name
        body = context.indent(2)

        lines = [f"{body}{target} {instance} = new {target}();"]
        lines.extend(
            f"{body}{instance}.{p.name} = this.{p.name};"
            for p in context.properties
        )
        lines.append(f"{body}return {instance};")
        return lines
