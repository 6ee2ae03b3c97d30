"""High-level builder generation service: facade for hosts and the API layer."""

from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, ValidationError

from buildergen.core.config import AppConfig
from buildergen.core.errors import (
    BuilderGenerationError, NameCollisionError, UnsupportedCombinationError,
)
from buildergen.core.generator import BuilderTextGenerator
from buildergen.core.registry import RuleRegistry
from buildergen.core.resolution import SettingsResolver
from buildergen.host.base import ClassMetadataProvider, InteractionSurface, SourceTree
from buildergen.host.preferences import RecentPackages, package_from_display
from buildergen.models import (
    BuilderOptions, ClassMetadata, GeneratedBuilder, GenerationSettings,
)
from buildergen.utils.logger import get_logger

logger = get_logger(__name__)


class BuilderOutcome(BaseModel):
    """What was generated and where it went."""
    settings: GenerationSettings
    builder: GeneratedBuilder
    inner: bool
    location: str                # Enclosing class or destination directory
    file_name: Optional[str] = None
    file_content: Optional[str] = None


class BuilderService:
    """
    Runs one generation request end to end: options, resolution,
    collision check, rendering, insertion.

    Nothing touches the source tree unless every step before insertion
    succeeded.
    """

    def __init__(
        self,
        source_tree: SourceTree,
        recent_packages: RecentPackages,
        interaction: InteractionSurface | None = None,
        config: AppConfig | None = None,
        registry: RuleRegistry | None = None,
        provider: ClassMetadataProvider | None = None,
    ) -> None:
        self.source_tree = source_tree
        self.recent_packages = recent_packages
        self.interaction = interaction
        self.config = config or AppConfig()
        self.generator = BuilderTextGenerator(registry)
        self.provider = provider

    def list_rules(self) -> list[dict[str, str]]:
        return [
            {"id": r.get_id(), "name": r.get_name()}
            for r in self.generator.registry.list_rules()
        ]

    def default_options(self, target: ClassMetadata) -> BuilderOptions:
        defaults = self.config.generation
        return BuilderOptions.defaults_for(
            target,
            suffix=defaults.builder_suffix,
            method_prefix=defaults.method_prefix,
        )

    def generate(self, target: ClassMetadata, options: BuilderOptions) -> BuilderOutcome:
        """
        Non-interactive generation. Raises a ``BuilderGenerationError`` (or a
        pydantic ``ValidationError`` for malformed names) on any failure.
        """
        if target.is_interface:
            raise UnsupportedCombinationError(
                f"Cannot generate a builder for interface {target.name}."
            )
        if options.package_name is not None:
            options = options.model_copy(
                update={"package_name": package_from_display(options.package_name)}
            )

        settings = SettingsResolver(self.interaction).resolve(target, options)
        self.check_collision(target, settings)

        builder = self.generator.generate(target, settings, self.config.generation.render)
        outcome = self._insert(target, settings, builder)
        if not settings.is_inner_builder:
            self.recent_packages.record(settings.package_name)
        return outcome

    def run(self, target: ClassMetadata) -> Optional[BuilderOutcome]:
        """
        Interactive generation. Every failure is reported through the
        interaction surface and yields ``None`` with the tree untouched.
        """
        if self.interaction is None:
            raise RuntimeError("run() needs an interaction surface")

        if target.is_interface:
            self.interaction.notify_error(
                "Cannot Create Builder",
                f"Cannot generate a builder for interface {target.name}.",
            )
            return None

        options = self.interaction.collect_generation_settings(
            self.default_options(target),
            self.recent_packages.choices(target.package_name),
        )
        if options is None:
            logger.info("Builder generation for %s cancelled", target.name)
            return None

        try:
            return self.generate(target, options)
        except BuilderGenerationError as exc:
            logger.warning("Builder generation for %s aborted: %s: %s", target.name, exc.kind, exc)
            if exc.kind == "NoCandidates":
                self.interaction.notify_info(exc.title, str(exc))
            else:
                self.interaction.notify_error(exc.title, str(exc))
        except ValidationError as exc:
            logger.warning("Builder generation for %s aborted: invalid settings", target.name)
            self.interaction.notify_error("Cannot Create Builder", _first_error(exc))
        return None

    def run_for(self, locator: str) -> Optional[BuilderOutcome]:
        """Look the class up through the metadata provider, then ``run()`` it."""
        if self.provider is None:
            raise RuntimeError("run_for() needs a class metadata provider")
        target = self.provider.class_metadata(locator)
        if target is None:
            logger.info("No class found at %s", locator)
            return None
        return self.run(target)

    def check_collision(self, target: ClassMetadata, settings: GenerationSettings) -> None:
        name = settings.builder_class_name
        if settings.is_inner_builder:
            if self.source_tree.find_inner_type(target, name) is not None:
                raise NameCollisionError(name, target.name, inner=True)
        elif self.source_tree.find_file(target.source_directory, settings.file_name) is not None:
            raise NameCollisionError(settings.file_name, target.source_directory or ".")

    def render_file(self, target: ClassMetadata, settings: GenerationSettings, text: str) -> str:
        """Wrap a top-level builder in its package declaration and import."""
        header = ""
        if settings.package_name:
            header += f"package {settings.package_name};\n\n"
            if target.package_name and target.package_name != settings.package_name:
                header += f"import {target.qualified_name};\n\n"
        return f"{header}{text}\n"

    def _insert(
        self, target: ClassMetadata, settings: GenerationSettings, builder: GeneratedBuilder,
    ) -> BuilderOutcome:
        if settings.is_inner_builder:
            self.source_tree.insert_inner_type(target, builder.class_name, builder.text)
            logger.info("Inserted inner builder %s into %s", builder.class_name, target.name)
            return BuilderOutcome(
                settings=settings, builder=builder, inner=True, location=target.name,
            )

        content = self.render_file(target, settings, builder.text)
        self.source_tree.create_file(target.source_directory, settings.file_name, content)
        logger.info("Created %s in %s", settings.file_name, target.source_directory or ".")
        return BuilderOutcome(
            settings=settings,
            builder=builder,
            inner=False,
            location=target.source_directory,
            file_name=settings.file_name,
            file_content=content,
        )


def _first_error(exc: ValidationError) -> str:
    errors = exc.errors()
    return errors[0]["msg"] if errors else str(exc)
