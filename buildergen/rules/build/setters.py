"""Build by calling the selected setters on a no-arg instance."""

from __future__ import annotations

from buildergen.core.naming import setter_field_name
from buildergen.models import BuilderContext, ViaSetters
from buildergen.rules.build.base import BuildMethodRule


class SetterBuildRule(BuildMethodRule):
    """``instance.setFoo(this.foo)`` for every selected setter, in selection order."""

    def get_id(self) -> str:
        return "build.setters"

    def get_name(self) -> str:
        return "Setter Build"

    def applies(self, context: BuilderContext) -> bool:
        return (
            not context.metadata.is_record
            and isinstance(context.settings.population, ViaSetters)
        )

    def body(self, context: BuilderContext) -> list[str]:
        target = context.metadata.name
        instance = context.instance_name
        body = context.indent(2)

        lines = [f"{body}{target} {instance} = new {target}();"]
        for setter in context.settings.selected_setters:
            lines.append(f"{body}{instance}.{setter}(this.{setter_field_name(setter)});")
        lines.append(f"{body}return {instance};")
        return lines
