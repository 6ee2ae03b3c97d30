"""Recently used destination packages, kept in an injectable key-value store."""

from __future__ import annotations
import json
import os
import tempfile
from pathlib import Path

from buildergen.host.base import KeyValueStore
from buildergen.utils.logger import get_logger

logger = get_logger(__name__)


EMPTY_PACKAGE_DISPLAY = "<default>"
RECENT_PACKAGES_KEY = "builder.recent.packages"
MAX_RECENT_PACKAGES = 5


class InMemoryKeyValueStore:
    """Process-local store, mostly for tests and the HTTP API."""

    def __init__(self, values: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def get_value(self, key: str, default: str = "") -> str:
        return self._values.get(key, default)

    def set_value(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFileKeyValueStore:
    """A flat JSON object on disk. Writes go through a temp file and a rename."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Preference file {self.path} does not hold a JSON object")
        return {str(k): str(v) for k, v in data.items()}

    def get_value(self, key: str, default: str = "") -> str:
        return self._load().get(key, default)

    def set_value(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.path.parent,
                prefix=".prefs-", suffix=".json", delete=False,
            ) as f:
                tmp = f.name
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp, self.path)
        except BaseException:
            if tmp is not None:
                os.unlink(tmp)
            raise


class RecentPackages:
    """
    Bounded most-recently-used list of destination packages.

    Stored as one comma-joined string under ``key``. Recording a package
    moves it to the front; the list never grows past ``max_count``.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = RECENT_PACKAGES_KEY,
        max_count: int = MAX_RECENT_PACKAGES,
    ) -> None:
        self.store = store
        self.key = key
        self.max_count = max_count

    def get(self) -> list[str]:
        raw = self.store.get_value(self.key, "")
        return [p for p in raw.split(",") if p]

    def record(self, package_name: str) -> None:
        if not package_name or package_name == EMPTY_PACKAGE_DISPLAY:
            return
        packages = [p for p in self.get() if p != package_name]
        packages.insert(0, package_name)
        self.store.set_value(self.key, ",".join(packages[: self.max_count]))
        logger.debug("Recent packages now %s", packages[: self.max_count])

    def choices(self, default_package: str) -> list[str]:
        """Combo box entries: the class's own package first, then other recents."""
        first = default_package or EMPTY_PACKAGE_DISPLAY
        others = [p for p in self.get() if p != default_package]
        return [first] + others[: self.max_count - 1]


def package_from_display(value: str) -> str:
    """Map the ``<default>`` placeholder back to the unnamed package."""
    return "" if value == EMPTY_PACKAGE_DISPLAY else value
