"""Structural metadata of a target class, as handed over by the host."""

from __future__ import annotations
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


class FieldInfo(BaseModel):
    """A declared field of the target class."""
    model_config = ConfigDict(frozen=True)

    name: str
    type_display_name: str
    is_static: bool = False


class RecordComponent(BaseModel):
    """A component of a record's canonical declaration."""
    model_config = ConfigDict(frozen=True)

    name: str
    type_display_name: str


class SetterSignature(BaseModel):
    """A single-argument ``set*`` method."""
    model_config = ConfigDict(frozen=True)

    method_name: str
    parameter_type_display_name: str


class ConstructorSignature(BaseModel):
    """A declared constructor, identified by its display text."""
    model_config = ConfigDict(frozen=True)

    display_text: str
    parameter_names: list[str] = []
    parameter_types: list[str] = []

    @classmethod
    def describe(
        cls, class_name: str, parameters: list[tuple[str, str]],
    ) -> ConstructorSignature:
        """Build a signature from ``(name, type)`` pairs, e.g. ``Point(int, int)``."""
        types = [t for _, t in parameters]
        return cls(
            display_text=f"{class_name}({', '.join(types)})",
            parameter_names=[n for n, _ in parameters],
            parameter_types=types,
        )


class BuilderProperty(BaseModel):
    """A value the builder collects: a non-static field or a record component."""
    model_config = ConfigDict(frozen=True)

    name: str
    type_display_name: str


class ClassMetadata(BaseModel):
    """
    Read-only snapshot of the class a builder is generated for.

    Records expose ``record_components``; every other class exposes
    ``fields`` (static ones are carried but never used).
    """
    model_config = ConfigDict(frozen=True)

    name: str
    qualified_name: str = ""
    package_name: str = ""
    source_directory: str = ""
    is_record: bool = False
    is_interface: bool = False
    fields: list[FieldInfo] = []
    record_components: list[RecordComponent] = []
    setters: list[SetterSignature] = []
    constructors: list[ConstructorSignature] = []

    @model_validator(mode="before")
    @classmethod
    def _default_qualified_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("qualified_name"):
            name = data.get("name", "")
            package = data.get("package_name") or ""
            data = {**data, "qualified_name": f"{package}.{name}" if package else name}
        return data

    @model_validator(mode="after")
    def _check_shape(self) -> ClassMetadata:
        if not self.is_record and self.record_components:
            raise ValueError(
                f"{self.name} is not a record but declares record components"
            )
        return self

    @property
    def instance_fields(self) -> list[FieldInfo]:
        return [f for f in self.fields if not f.is_static]

    def setter_candidates(self) -> list[str]:
        return [s.method_name for s in self.setters if s.method_name.startswith("set")]

    def constructor_candidates(self) -> list[str]:
        return [c.display_text for c in self.constructors]

    def find_constructor(self, display_text: str) -> ConstructorSignature | None:
        for ctor in self.constructors:
            if ctor.display_text == display_text:
                return ctor
        return None
