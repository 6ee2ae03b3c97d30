"""Build through an existing constructor picked by the user."""

from __future__ import annotations

from buildergen.models import BuilderContext, ViaConstructor, CONSTRUCTOR_NOT_FOUND
from buildergen.rules.build.base import BuildMethodRule, positional_new
from buildergen.utils.logger import get_logger

logger = get_logger(__name__)


class ConstructorBuildRule(BuildMethodRule):
    """
    Passes the builder fields positionally, named after the constructor's
    parameters. Parameter names are assumed to match builder field names.
    """

    def get_id(self) -> str:
        return "build.constructor"

    def get_name(self) -> str:
        return "Constructor Build"

    def applies(self, context: BuilderContext) -> bool:
        return (
            not context.metadata.is_record
            and isinstance(context.settings.population, ViaConstructor)
        )

    def body(self, context: BuilderContext) -> list[str]:
        ctor = context.constructor
        if ctor is None:
            # Stale selection: keep going with a placeholder.
            logger.warning(
                "Constructor %r not found in %s, emitting placeholder build()",
                context.settings.selected_constructor_signature,
                context.metadata.name,
            )
            context.warn(CONSTRUCTOR_NOT_FOUND)
            return [f"{context.indent(2)}// Selected constructor not found."]
        return positional_new(context, list(ctor.parameter_names))
