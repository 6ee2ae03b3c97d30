"""
Configuration for the builder generator.

Pydantic models with sensible defaults, loadable from and savable to YAML.
"""

from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field

from buildergen.models.parameters import RenderConfig
from buildergen.models.settings import DEFAULT_BUILDER_SUFFIX, DEFAULT_METHOD_PREFIX
from buildergen.host.preferences import MAX_RECENT_PACKAGES, RECENT_PACKAGES_KEY


CONFIG_ENV_VAR = "BUILDERGEN_CONFIG"


class GenerationDefaults(BaseModel):
    """Dialog defaults and rendering parameters."""
    builder_suffix: str = DEFAULT_BUILDER_SUFFIX
    method_prefix: str = DEFAULT_METHOD_PREFIX
    render: RenderConfig = Field(default_factory=RenderConfig)


class PreferencesConfig(BaseModel):
    recent_packages_key: str = RECENT_PACKAGES_KEY
    max_recent_packages: int = Field(default=MAX_RECENT_PACKAGES, ge=1)
    store_path: Optional[Path] = None     # None = keep preferences in memory


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    file: Optional[Path] = None


class ApiConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = 8000


class AppConfig(BaseModel):
    """
    Root configuration object containing all settings.

    Can be loaded from a YAML file or constructed programmatically.
    """
    generation: GenerationDefaults = Field(default_factory=GenerationDefaults)
    preferences: PreferencesConfig = Field(default_factory=PreferencesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> AppConfig:
        """
        Load configuration from a YAML file.

        Raises:
            FileNotFoundError: If the config file doesn't exist
            pydantic.ValidationError: If the config file is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        return cls.model_validate(data)

    def to_yaml(self, path: Path | str) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)


def load_config(config_path: Optional[Path | str] = None) -> AppConfig:
    """
    Load configuration from file or return defaults.

    Looks for config in this order:
    1. Provided path
    2. $BUILDERGEN_CONFIG
    3. ./buildergen.yaml
    4. ~/.buildergen/config.yaml
    5. Default values
    """
    if config_path:
        return AppConfig.from_yaml(config_path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return AppConfig.from_yaml(env_path)

    for path in (Path("buildergen.yaml"), Path.home() / ".buildergen" / "config.yaml"):
        if path.exists():
            return AppConfig.from_yaml(path)

    return AppConfig()
