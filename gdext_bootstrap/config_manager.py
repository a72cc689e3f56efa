"""
ConfigManager: settings loader for gdext-bootstrap.

Loads configuration from YAML, validates it with Pydantic, applies environment
variable overrides and caches the result until reload() is called. A missing
or invalid file never aborts a run: defaults are used and a warning logged.

Google-style docstrings and type hints are used throughout.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


logger = logging.getLogger(__name__)

DEFAULT_REPO_URL = "https://github.com/godotengine/godot-cpp"
DEFAULT_CONFIG_FILE = Path.home() / ".gdext_bootstrap" / "settings.yaml"


# ---------------------------------------------------------------------------
# Pydantic models for schema validation
# ---------------------------------------------------------------------------


class BindingConfig(BaseModel):
    """Binding repository and the build tool it needs.

    Attributes:
        repo_url: Default godot-cpp repository URL.
        build_package: Python package installed with pip for building.
    """

    model_config = ConfigDict(extra="forbid")

    repo_url: str = DEFAULT_REPO_URL
    build_package: str = "SCons"


class ToolsConfig(BaseModel):
    """External executables looked up on PATH.

    Attributes:
        git: Version control executable.
        python: Interpreter candidates, first one found wins.
    """

    model_config = ConfigDict(extra="forbid")

    git: str = "git"
    python: List[str] = Field(default_factory=lambda: ["python", "python3"])

    @field_validator("python", mode="before")
    @classmethod
    def split_candidates(cls, v):
        if isinstance(v, str):
            return [c.strip() for c in v.split(",") if c.strip()]
        return v

    @field_validator("python")
    @classmethod
    def require_candidate(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("at least one python candidate is required")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: str = Field(default="INFO", pattern=r"^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    file: Optional[Path] = None


class Settings(BaseModel):
    """Top-level configuration structure."""

    model_config = ConfigDict(extra="forbid")

    binding: BindingConfig = Field(default_factory=BindingConfig)
    tools: ToolsConfig = Field(default_factory=ToolsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# ---------------------------------------------------------------------------
# ConfigManager
# ---------------------------------------------------------------------------


class ConfigManager:
    """Manager for application configuration.

    Responsibilities:
    - Locate and load the YAML configuration file,
    - Validate structure via Pydantic models,
    - Apply environment variable overrides,
    - Cache the result; reload() forces a re-read.

    File lookup order: explicit ``config_file`` argument, ``GDEXT_CONFIG_FILE``,
    then ``~/.gdext_bootstrap/settings.yaml``.

    Environment overrides supported:
    - GDEXT_REPO_URL, GDEXT_GIT
    - GDEXT_PYTHON (comma separated interpreter candidates)
    - LOG_LEVEL, LOG_FILE
    """

    def __init__(self, config_file: Optional[Path] = None) -> None:
        env_file = os.getenv("GDEXT_CONFIG_FILE")
        if config_file is not None:
            self._config_file = Path(config_file)
        elif env_file:
            self._config_file = Path(env_file)
        else:
            self._config_file = DEFAULT_CONFIG_FILE
        self._cached_settings: Optional[Settings] = None

    # ------------------------------ Public API ------------------------------

    def get(self) -> Settings:
        """Return current settings, loading them on first use.

        Returns:
            Settings: Validated and possibly overridden configuration.
        """

        if self._cached_settings is None:
            self._cached_settings = self._load_and_validate()
        return self._cached_settings

    def reload(self) -> Settings:
        """Force a reload of the configuration.

        Returns:
            Settings: Freshly loaded configuration.
        """

        logger.debug("Reloading configuration from %s", self._config_file)
        self._cached_settings = None
        return self.get()

    def get_config_file(self) -> Path:
        """Get the configuration file path in use.

        Returns:
            Path: Config file path (may not exist).
        """

        return self._config_file

    # ----------------------------- Internal logic ---------------------------

    def _load_and_validate(self) -> Settings:
        """Load YAML settings, validate them and apply env overrides.

        Returns:
            Settings: Validated settings.
        """

        data = None
        if self._config_file.exists():
            try:
                with self._config_file.open("r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
                logger.debug("Loaded configuration file: %s", self._config_file)
            except (OSError, yaml.YAMLError) as e:
                logger.warning(
                    "Failed to load YAML config (%s). Falling back to defaults. Error: %s",
                    self._config_file,
                    e,
                )
        else:
            logger.debug("Config file not found: %s. Using default configuration.", self._config_file)

        try:
            settings = Settings(**data) if isinstance(data, dict) else Settings()
        except ValidationError as ve:
            logger.warning("Invalid configuration schema. Using defaults. Details: %s", ve)
            settings = Settings()

        return self._apply_env_overrides(settings)

    def _apply_env_overrides(self, settings: Settings) -> Settings:
        """Apply environment variable overrides to settings.

        Args:
            settings: Settings loaded from file or defaults.

        Returns:
            Settings: New settings object with overrides applied.
        """

        overrides = [
            ("GDEXT_REPO_URL", "binding", "repo_url", None),
            ("GDEXT_GIT", "tools", "git", None),
            ("GDEXT_PYTHON", "tools", "python", None),
            ("LOG_LEVEL", "logging", "level", str.upper),
            ("LOG_FILE", "logging", "file", None),
        ]

        # Each variable is validated on its own so one bad value only drops itself.
        for env_name, section, key, convert in overrides:
            raw = os.getenv(env_name)
            if not raw:
                continue
            current = getattr(settings, section)
            candidate = current.model_dump()
            candidate[key] = convert(raw) if convert else raw
            try:
                updated = type(current)(**candidate)
            except ValidationError as ve:
                logger.warning("Invalid value for %s: %r (ignored). Details: %s", env_name, raw, ve)
                continue
            settings = settings.model_copy(update={section: updated})

        return settings
