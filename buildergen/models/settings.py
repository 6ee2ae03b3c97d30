"""Builder generation settings: raw dialog state and the resolved form."""

from __future__ import annotations
import re
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .metadata import ClassMetadata


JAVA_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

JAVA_RESERVED_WORDS = frozenset("""
    abstract assert boolean break byte case catch char class const continue
    default do double else enum extends final finally float for goto if
    implements import instanceof int interface long native new package
    private protected public return short static strictfp super switch
    synchronized this throw throws transient try void volatile while _
    true false null
""".split())

DEFAULT_BUILDER_SUFFIX = "Builder"
DEFAULT_METHOD_PREFIX = "with"


class BuilderOptions(BaseModel):
    """
    What the user picked in the configuration dialog.

    Flat flags mirror the dialog's check boxes. Nothing here is validated
    against the target class; that is the resolver's job.
    """
    builder_class_name: str
    method_prefix: str = DEFAULT_METHOD_PREFIX
    package_name: Optional[str] = ""   # None = ask the user for one
    is_inner_builder: bool = False
    has_but_method: bool = False
    use_setter: bool = False
    use_exist_constructor: bool = False
    selected_setters: list[str] = []
    selected_constructor_signature: Optional[str] = None

    @classmethod
    def defaults_for(
        cls,
        metadata: ClassMetadata,
        suffix: str = DEFAULT_BUILDER_SUFFIX,
        method_prefix: str = DEFAULT_METHOD_PREFIX,
    ) -> BuilderOptions:
        return cls(
            builder_class_name=metadata.name + suffix,
            method_prefix=method_prefix,
            package_name=metadata.package_name,
        )


class DirectFields(BaseModel):
    """``build()`` assigns every field directly on a fresh instance."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["direct_fields"] = "direct_fields"


class ViaSetters(BaseModel):
    """``build()`` calls the selected setters on a fresh instance."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["via_setters"] = "via_setters"
    setters: list[str] = Field(min_length=1)


class ViaConstructor(BaseModel):
    """``build()`` delegates to an existing constructor."""
    model_config = ConfigDict(frozen=True)
    kind: Literal["via_constructor"] = "via_constructor"
    signature: str = Field(min_length=1)


PopulationStrategy = Annotated[
    Union[DirectFields, ViaSetters, ViaConstructor],
    Field(discriminator="kind"),
]


class GenerationSettings(BaseModel):
    """Complete, consistent settings consumed once by the generator."""
    model_config = ConfigDict(frozen=True)

    builder_class_name: str
    method_prefix: str = DEFAULT_METHOD_PREFIX
    package_name: str = ""
    is_inner_builder: bool = False
    has_but_method: bool = False
    population: PopulationStrategy = Field(default_factory=DirectFields)

    @field_validator("builder_class_name")
    @classmethod
    def _class_name_is_identifier(cls, value: str) -> str:
        if not JAVA_IDENTIFIER.match(value) or value in JAVA_RESERVED_WORDS:
            raise ValueError(f"invalid builder class name: {value!r}")
        return value

    @field_validator("method_prefix")
    @classmethod
    def _prefix_is_identifier(cls, value: str) -> str:
        if value and not JAVA_IDENTIFIER.match(value):
            raise ValueError(f"invalid method prefix: {value!r}")
        return value

    @property
    def use_setter(self) -> bool:
        return isinstance(self.population, ViaSetters)

    @property
    def use_exist_constructor(self) -> bool:
        return isinstance(self.population, ViaConstructor)

    @property
    def selected_setters(self) -> list[str]:
        if isinstance(self.population, ViaSetters):
            return list(self.population.setters)
        return []

    @property
    def selected_constructor_signature(self) -> str | None:
        if isinstance(self.population, ViaConstructor):
            return self.population.signature
        return None

    @property
    def file_name(self) -> str:
        return f"{self.builder_class_name}.java"
