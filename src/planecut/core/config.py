"""
Configuration management for planecut.

Handles loading, validation, and access to cutting, output and logging
settings stored in a single YAML file.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from planecut.core.exceptions import ConfigurationError

DEFAULT_TOLERANCE = 1e-5


class CuttingSettings(BaseModel):
    """Cutting algorithm settings."""

    tolerance: float = Field(default=DEFAULT_TOLERANCE, gt=0.0, lt=0.5)
    zero_origin_means_unset: bool = True


class OutputSettings(BaseModel):
    """Output file settings."""

    path: str = "output.obj"
    precision: int = Field(default=9, ge=1, le=17)


class LoggingSettings(BaseModel):
    """Logging settings."""

    level: str = "INFO"
    json_output: bool = False
    log_file: Optional[str] = None

    @field_validator("level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {value}")
        return level


class PlanecutConfig(BaseModel):
    """Top-level configuration model."""

    cutting: CuttingSettings = Field(default_factory=CuttingSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@dataclass
class ConfigManager:
    """
    Configuration manager for planecut.

    Loads and validates a YAML configuration file. Every section is optional
    and falls back to its defaults.

    Example:
        >>> config = ConfigManager(config_path=Path("planecut.yaml"))
        >>> config.settings.cutting.tolerance
        1e-05
    """

    config_path: Path
    _settings: PlanecutConfig | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        """Initialize configuration manager."""
        self.config_path = Path(self.config_path)
        if not self.config_path.is_file():
            raise ConfigurationError(
                f"Configuration file not found: {self.config_path}"
            )

    def load(self) -> PlanecutConfig:
        """Load the configuration from disk."""
        try:
            with open(self.config_path) as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Failed to parse config: {self.config_path}",
                details={"error": str(e)},
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config must be a mapping: {self.config_path}",
                details={"type": type(data).__name__},
            )

        try:
            self._settings = PlanecutConfig(**data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid config: {self.config_path}",
                details={"error": str(e)},
            ) from e
        return self._settings

    @property
    def settings(self) -> PlanecutConfig:
        """Loaded configuration, read from disk on first access."""
        if self._settings is None:
            return self.load()
        return self._settings


def load_config(config_path: str | Path | None = None, **overrides: Any) -> PlanecutConfig:
    """
    Load configuration, falling back to defaults when no path is given.

    Args:
        config_path: Optional YAML file.
        **overrides: Section overrides, e.g. ``cutting={"tolerance": 1e-4}``.

    Returns:
        PlanecutConfig instance

    Raises:
        ConfigurationError: If the file is missing or invalid
    """
    if config_path is None:
        config = PlanecutConfig()
    else:
        config = ConfigManager(Path(config_path)).settings

    if not overrides:
        return config
    return apply_overrides(config, **overrides)


def apply_overrides(config: PlanecutConfig, **overrides: dict[str, Any]) -> PlanecutConfig:
    """
    Return a validated copy of ``config`` with section values replaced.

    Raises:
        ConfigurationError: If a section is unknown or a value is invalid
    """
    data = config.model_dump()
    for section, values in overrides.items():
        if section not in data:
            raise ConfigurationError(
                f"Unknown configuration section: {section}",
                details={"available": list(data.keys())},
            )
        data[section].update(values)
    try:
        return PlanecutConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(
            "Invalid configuration override",
            details={"error": str(e)},
        ) from e
