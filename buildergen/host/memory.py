"""In-memory host collaborators.

Used by the HTTP API, where there is no user to ask, and by the tests.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

from buildergen.core.errors import NameCollisionError
from buildergen.models import BuilderOptions, ClassMetadata


class InMemoryMetadataProvider:
    """Metadata snapshots keyed by whatever locator the host uses."""

    def __init__(self, classes: dict[str, ClassMetadata] | None = None) -> None:
        self._classes = dict(classes or {})

    def add(self, locator: str, metadata: ClassMetadata) -> None:
        self._classes[locator] = metadata

    def class_metadata(self, locator: str) -> Optional[ClassMetadata]:
        return self._classes.get(locator)


class InMemorySourceTree:
    """
    Directories of source files plus the inner types of each class.

    Both mutations check for a clash first and change nothing when
    they find one.
    """

    def __init__(self) -> None:
        self.files: dict[str, dict[str, str]] = {}
        self.inner_types: dict[str, dict[str, str]] = {}

    def find_inner_type(self, target: ClassMetadata, name: str) -> Optional[str]:
        return self.inner_types.get(target.qualified_name, {}).get(name)

    def find_file(self, directory: str, file_name: str) -> Optional[str]:
        return self.files.get(directory, {}).get(file_name)

    def insert_inner_type(self, target: ClassMetadata, name: str, text: str) -> None:
        if self.find_inner_type(target, name) is not None:
            raise NameCollisionError(name, target.name, inner=True)
        self.inner_types.setdefault(target.qualified_name, {})[name] = text

    def create_file(self, directory: str, file_name: str, text: str) -> None:
        if self.find_file(directory, file_name) is not None:
            raise NameCollisionError(file_name, directory or ".")
        self.files.setdefault(directory, {})[file_name] = text


@dataclass
class ScriptedInteraction:
    """
    Replays canned answers instead of showing dialogs.

    Every ``None`` answer behaves like the user closing the dialog.
    Notifications are kept in ``notifications`` as (level, title, message).
    """

    options: Optional[BuilderOptions] = None
    setters: Optional[list[str]] = None
    constructor: Optional[str] = None
    package: Optional[str] = None
    notifications: list[tuple[str, str, str]] = field(default_factory=list)
    prompts: list[str] = field(default_factory=list)

    def collect_generation_settings(
        self, defaults: BuilderOptions, recent_packages: list[str],
    ) -> Optional[BuilderOptions]:
        self.prompts.append("settings")
        return self.options

    def pick_setters(self, candidates: list[str]) -> Optional[list[str]]:
        self.prompts.append("setters")
        return self.setters

    def pick_constructor(self, candidates: list[str]) -> Optional[str]:
        self.prompts.append("constructor")
        return self.constructor

    def pick_package(self) -> Optional[str]:
        self.prompts.append("package")
        return self.package

    def notify_info(self, title: str, message: str) -> None:
        self.notifications.append(("info", title, message))

    def notify_error(self, title: str, message: str) -> None:
        self.notifications.append(("error", title, message))
