"""Contracts of the host-side collaborators.

The core never talks to an IDE directly. Whatever embeds it supplies
these: metadata for the class under the caret, modal prompts, the
source tree to write into, and a small preference store.
"""

from __future__ import annotations
from typing import Optional, Protocol

from buildergen.models import BuilderOptions, ClassMetadata


class ClassMetadataProvider(Protocol):
    """Turns a located class declaration into a metadata snapshot."""

    def class_metadata(self, locator: str) -> Optional[ClassMetadata]:
        """Return metadata for the class at ``locator``, or None if there is none."""
        ...


class InteractionSurface(Protocol):
    """Blocking, modal request/response prompts. ``None`` means cancelled."""

    def collect_generation_settings(
        self, defaults: BuilderOptions, recent_packages: list[str],
    ) -> Optional[BuilderOptions]:
        ...

    def pick_setters(self, candidates: list[str]) -> Optional[list[str]]:
        ...

    def pick_constructor(self, candidates: list[str]) -> Optional[str]:
        ...

    def pick_package(self) -> Optional[str]:
        ...

    def notify_info(self, title: str, message: str) -> None:
        ...

    def notify_error(self, title: str, message: str) -> None:
        ...


class SourceTree(Protocol):
    """Where generated builders land. Mutations are all-or-nothing."""

    def find_inner_type(self, target: ClassMetadata, name: str) -> Optional[str]:
        """Return the text of an existing inner type called ``name``, if any."""
        ...

    def find_file(self, directory: str, file_name: str) -> Optional[str]:
        ...

    def insert_inner_type(self, target: ClassMetadata, name: str, text: str) -> None:
        ...

    def create_file(self, directory: str, file_name: str, text: str) -> None:
        ...


class KeyValueStore(Protocol):
    """String preferences, e.g. the recently used packages."""

    def get_value(self, key: str, default: str = "") -> str:
        ...

    def set_value(self, key: str, value: str) -> None:
        ...
