"""Shared fixtures: a few representative target classes."""

import pytest

from buildergen.core.generator import BuilderTextGenerator
from buildergen.host.memory import InMemorySourceTree, ScriptedInteraction
from buildergen.host.preferences import InMemoryKeyValueStore, RecentPackages
from buildergen.models import (
    ClassMetadata,
    ConstructorSignature,
    FieldInfo,
    RecordComponent,
    SetterSignature,
)
from buildergen.services.builder_service import BuilderService


@pytest.fixture
def point() -> ClassMetadata:
    return ClassMetadata(
        name="Point",
        package_name="geo",
        source_directory="src/geo",
        fields=[
            FieldInfo(name="x", type_display_name="int"),
            FieldInfo(name="y", type_display_name="int"),
        ],
    )


@pytest.fixture
def person() -> ClassMetadata:
    """A bean with a static constant, setters and two constructors."""
    return ClassMetadata(
        name="Person",
        package_name="com.acme.model",
        source_directory="src/com/acme/model",
        fields=[
            FieldInfo(name="COUNTER", type_display_name="int", is_static=True),
            FieldInfo(name="name", type_display_name="String"),
            FieldInfo(name="age", type_display_name="int"),
            FieldInfo(name="tags", type_display_name="List<String>"),
        ],
        setters=[
            SetterSignature(method_name="setName", parameter_type_display_name="String"),
            SetterSignature(method_name="setAge", parameter_type_display_name="int"),
            SetterSignature(method_name="setTags", parameter_type_display_name="List<String>"),
        ],
        constructors=[
            ConstructorSignature.describe("Person", []),
            ConstructorSignature.describe("Person", [("name", "String"), ("age", "int")]),
        ],
    )


@pytest.fixture
def money() -> ClassMetadata:
    return ClassMetadata(
        name="Money",
        package_name="com.acme.finance",
        source_directory="src/com/acme/finance",
        is_record=True,
        record_components=[
            RecordComponent(name="amount", type_display_name="BigDecimal"),
            RecordComponent(name="currency", type_display_name="Currency"),
        ],
    )


@pytest.fixture
def generator() -> BuilderTextGenerator:
    return BuilderTextGenerator()


@pytest.fixture
def tree() -> InMemorySourceTree:
    return InMemorySourceTree()


@pytest.fixture
def recent() -> RecentPackages:
    return RecentPackages(InMemoryKeyValueStore())


@pytest.fixture
def interaction() -> ScriptedInteraction:
    return ScriptedInteraction()


@pytest.fixture
def service(tree, recent, interaction) -> BuilderService:
    return BuilderService(tree, recent, interaction=interaction)
