"""Integration tests for the end-to-end builder service."""

import pytest

from buildergen.core.config import AppConfig
from buildergen.core.errors import (
    ConflictingModesError,
    NameCollisionError,
    UnsupportedCombinationError,
)
from buildergen.host.memory import InMemoryMetadataProvider
from buildergen.models import BuilderOptions, ClassMetadata, CONSTRUCTOR_NOT_FOUND
from buildergen.services.builder_service import BuilderService


def options(**kwargs) -> BuilderOptions:
    kwargs.setdefault("builder_class_name", "PointBuilder")
    return BuilderOptions(**kwargs)


class TestGenerate:

    def test_sibling_file_with_package_and_import(self, service, tree, point):
        outcome = service.generate(point, options(package_name="geo.builders", has_but_method=True))

        assert outcome.file_name == "PointBuilder.java"
        content = tree.find_file("src/geo", "PointBuilder.java")
        assert content == outcome.file_content
        assert content.startswith("package geo.builders;\n\nimport geo.Point;\n\npublic class PointBuilder {")
        assert content.endswith("}\n")
        assert "withX(int x)" in content
        assert ".withX(x)\n            .withY(y);" in content

    def test_same_package_needs_no_import(self, service, point):
        outcome = service.generate(point, options(package_name="geo"))
        assert outcome.file_content.startswith("package geo;\n\npublic class PointBuilder {")

    def test_default_package_has_no_header(self, service, point):
        outcome = service.generate(point, options(package_name="<default>"))
        assert outcome.settings.package_name == ""
        assert outcome.file_content.startswith("public class PointBuilder {")

    def test_inner_builder(self, service, tree, point):
        outcome = service.generate(point, options(is_inner_builder=True))

        assert outcome.inner
        assert outcome.file_name is None
        text = tree.find_inner_type(point, "PointBuilder")
        assert text.startswith("public static class PointBuilder {")
        assert tree.files == {}

    def test_records_recent_package(self, service, recent, point):
        service.generate(point, options(package_name="geo.builders"))
        service.generate(point, options(builder_class_name="PointMaker", package_name="geo"))
        assert recent.get() == ["geo", "geo.builders"]

    def test_inner_builder_does_not_touch_recent_packages(self, service, recent, point):
        service.generate(point, options(is_inner_builder=True, package_name="geo"))
        assert recent.get() == []

    def test_rejected_request_does_not_touch_recent_packages(self, service, tree, recent, point):
        tree.create_file("src/geo", "PointBuilder.java", "// hand written")
        with pytest.raises(NameCollisionError):
            service.generate(point, options(package_name="geo.builders"))

        with pytest.raises(UnsupportedCombinationError):
            service.generate(point, options(builder_class_name="Point", package_name="geo.other"))

        assert recent.get() == []

    def test_render_config_without_build_rule_is_rejected(self, tree, recent, point):
        config = AppConfig.model_validate(
            {"generation": {"render": {"disabled_rules": ["build.direct"]}}}
        )
        service = BuilderService(tree, recent, config=config)

        with pytest.raises(UnsupportedCombinationError):
            service.generate(point, options(package_name="geo"))

        assert tree.files == {}
        assert recent.get() == []

    def test_conflicting_modes_produce_nothing(self, service, tree, person):
        with pytest.raises(ConflictingModesError):
            service.generate(person, options(
                builder_class_name="PersonBuilder",
                use_setter=True,
                use_exist_constructor=True,
            ))
        assert tree.files == {}
        assert tree.inner_types == {}

    def test_stale_constructor_still_inserts(self, service, person):
        outcome = service.generate(person, options(
            builder_class_name="PersonBuilder",
            package_name="com.acme.model",
            use_exist_constructor=True,
            selected_constructor_signature="Person(long)",
        ))
        assert outcome.builder.warnings == [CONSTRUCTOR_NOT_FOUND]
        assert "// Selected constructor not found." in outcome.file_content

    def test_interface_is_rejected(self, service):
        with pytest.raises(UnsupportedCombinationError):
            service.generate(ClassMetadata(name="Shape", is_interface=True), options(
                builder_class_name="ShapeBuilder",
            ))

    def test_list_rules(self, service):
        assert {"id": "build.direct", "name": "Direct Field Build"} in service.list_rules()


class TestNameCollision:

    def test_existing_inner_type_aborts(self, service, tree, point):
        tree.insert_inner_type(point, "PointBuilder", "class PointBuilder {}")

        with pytest.raises(NameCollisionError) as excinfo:
            service.generate(point, options(is_inner_builder=True))

        assert "already exists in Point" in str(excinfo.value)
        assert tree.find_inner_type(point, "PointBuilder") == "class PointBuilder {}"

    def test_existing_file_aborts(self, service, tree, point):
        tree.create_file("src/geo", "PointBuilder.java", "// hand written")

        with pytest.raises(NameCollisionError):
            service.generate(point, options(package_name="geo"))

        assert tree.find_file("src/geo", "PointBuilder.java") == "// hand written"

    def test_same_name_elsewhere_is_fine(self, service, tree, point):
        tree.create_file("src/other", "PointBuilder.java", "// unrelated")
        outcome = service.generate(point, options(package_name="geo"))
        assert outcome.location == "src/geo"


class TestRun:

    def test_happy_path(self, service, interaction, tree, point):
        interaction.options = options(package_name="geo", has_but_method=True)

        outcome = service.run(point)

        assert outcome is not None
        assert interaction.prompts == ["settings"]
        assert interaction.notifications == []
        assert tree.find_file("src/geo", "PointBuilder.java") is not None

    def test_cancelled_dialog(self, service, interaction, tree, point):
        interaction.options = None
        assert service.run(point) is None
        assert tree.files == {}
        assert interaction.notifications == []

    def test_setter_prompt_cancelled(self, service, interaction, tree, person):
        interaction.options = options(builder_class_name="PersonBuilder", use_setter=True)
        interaction.setters = None

        assert service.run(person) is None
        assert interaction.prompts == ["settings", "setters"]
        assert interaction.notifications == [("error", "Cannot Proceed", "No setters selected.")]
        assert tree.files == {}

    def test_setter_prompt_answered(self, service, interaction, person):
        interaction.options = options(builder_class_name="PersonBuilder", use_setter=True)
        interaction.setters = ["setName", "setAge"]

        outcome = service.run(person)

        assert "person.setName(this.name);" in outcome.builder.text
        assert "person.setAge(this.age);" in outcome.builder.text

    def test_no_setters_is_reported_as_info(self, service, interaction, point):
        interaction.options = options(use_setter=True)

        assert service.run(point) is None
        assert interaction.notifications == [
            ("info", "No Setters", "No setter methods found in the class."),
        ]

    def test_collision_is_reported(self, service, interaction, tree, point):
        tree.insert_inner_type(point, "PointBuilder", "class PointBuilder {}")
        interaction.options = options(is_inner_builder=True)

        assert service.run(point) is None
        level, title, message = interaction.notifications[0]
        assert (level, title) == ("error", "Cannot Create Builder")
        assert "PointBuilder" in message

    def test_invalid_class_name_is_reported(self, service, interaction, tree, point):
        interaction.options = options(builder_class_name="Point Builder")

        assert service.run(point) is None
        assert interaction.notifications[0][:2] == ("error", "Cannot Create Builder")
        assert tree.files == {}

    def test_interface_never_opens_dialog(self, service, interaction):
        assert service.run(ClassMetadata(name="Shape", is_interface=True)) is None
        assert interaction.prompts == []
        assert interaction.notifications[0][0] == "error"

    def test_requires_interaction(self, tree, recent, point):
        with pytest.raises(RuntimeError):
            BuilderService(tree, recent).run(point)


class TestRunFor:

    def test_looks_up_metadata(self, tree, recent, interaction, point):
        provider = InMemoryMetadataProvider({"src/geo/Point.java:3": point})
        service = BuilderService(tree, recent, interaction=interaction, provider=provider)
        interaction.options = options(is_inner_builder=True)

        assert service.run_for("src/geo/Point.java:3") is not None
        assert service.run_for("src/geo/Point.java:99") is None
        assert interaction.prompts == ["settings"]
