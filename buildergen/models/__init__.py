from .metadata import (
    FieldInfo, RecordComponent, SetterSignature, ConstructorSignature,
    BuilderProperty, ClassMetadata,
)
from .settings import (
    BuilderOptions, DirectFields, ViaSetters, ViaConstructor,
    PopulationStrategy, GenerationSettings,
)
from .parameters import RenderConfig
from .output import CodeBlock, GeneratedBuilder, CONSTRUCTOR_NOT_FOUND
from .context import BuilderContext

__all__ = [
    "FieldInfo", "RecordComponent", "SetterSignature", "ConstructorSignature",
    "BuilderProperty", "ClassMetadata",
    "BuilderOptions", "DirectFields", "ViaSetters", "ViaConstructor",
    "PopulationStrategy", "GenerationSettings",
    "RenderConfig",
    "CodeBlock", "GeneratedBuilder", "CONSTRUCTOR_NOT_FOUND",
    "BuilderContext",
]
