"""Settings resolution: turns dialog state into complete generation settings."""

from __future__ import annotations
from typing import Optional

from buildergen.core.errors import (
    ConflictingModesError, IncompleteSelectionError, NoCandidatesError,
)
from buildergen.host.base import InteractionSurface
from buildergen.models import (
    BuilderOptions, ClassMetadata, DirectFields, GenerationSettings,
    PopulationStrategy, ViaConstructor, ViaSetters,
)
from buildergen.utils.logger import get_logger

logger = get_logger(__name__)


class SettingsResolver:
    """
    Validates raw options against the target class and asks the user for
    whatever is still missing.

    Without an interaction surface nothing can be asked, so a missing
    setter, constructor or package pick fails straight away.
    """

    def __init__(self, interaction: Optional[InteractionSurface] = None) -> None:
        self.interaction = interaction

    def resolve(self, metadata: ClassMetadata, options: BuilderOptions) -> GenerationSettings:
        if options.use_setter and options.use_exist_constructor:
            raise ConflictingModesError()

        if metadata.is_record:
            # Records are always built through their canonical constructor.
            population: PopulationStrategy = DirectFields()
        else:
            population = self._resolve_population(metadata, options)

        return GenerationSettings(
            builder_class_name=options.builder_class_name,
            method_prefix=options.method_prefix,
            package_name=self._resolve_package(options),
            is_inner_builder=options.is_inner_builder,
            has_but_method=options.has_but_method,
            population=population,
        )

    def _resolve_population(
        self, metadata: ClassMetadata, options: BuilderOptions,
    ) -> PopulationStrategy:
        if options.use_exist_constructor:
            return ViaConstructor(signature=self._resolve_constructor(metadata, options))
        if options.use_setter:
            return ViaSetters(setters=self._resolve_setters(metadata, options))
        return DirectFields()

    def _resolve_setters(self, metadata: ClassMetadata, options: BuilderOptions) -> list[str]:
        candidates = metadata.setter_candidates()
        if not candidates:
            raise NoCandidatesError("setters")

        picked = _known(options.selected_setters, candidates)
        if not picked and self.interaction is not None:
            logger.debug("Asking for setters of %s", metadata.name)
            picked = _known(self.interaction.pick_setters(candidates) or [], candidates)
        if not picked:
            raise IncompleteSelectionError("setters")
        return picked

    def _resolve_constructor(self, metadata: ClassMetadata, options: BuilderOptions) -> str:
        candidates = metadata.constructor_candidates()
        if not candidates:
            raise NoCandidatesError("constructors")

        # A stale signature is passed through; the generator degrades gracefully.
        picked = options.selected_constructor_signature
        if not picked and self.interaction is not None:
            logger.debug("Asking for a constructor of %s", metadata.name)
            picked = self.interaction.pick_constructor(candidates)
        if not picked:
            raise IncompleteSelectionError("constructor")
        return picked

    def _resolve_package(self, options: BuilderOptions) -> str:
        if options.is_inner_builder:
            return ""
        if options.package_name is not None:
            return options.package_name
        picked = self.interaction.pick_package() if self.interaction is not None else None
        if picked is None:
            raise IncompleteSelectionError("package")
        return picked


def _known(picks: list[str], candidates: list[str]) -> list[str]:
    """Drop unknown and repeated picks, keeping pick order."""
    seen: set[str] = set()
    result = []
    for name in picks:
        if name in candidates and name not in seen:
            seen.add(name)
            result.append(name)
    return result
