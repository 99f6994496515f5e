"""Configuration module for geotemporal.

Load and validate TOML configuration with Pydantic models and environment
overrides. As a Layer 1 module, may import: exceptions, precision.

Environment variables use the GEOTEMPORAL_ prefix and a double underscore
between nested keys:

    GEOTEMPORAL_DATES__DELIMITER=/
    GEOTEMPORAL_LOGGING__LEVEL=debug

Example TOML:

    [dates]
    delimiter = "-"
    range_separator = " - "
    default_resolution = "month"

    [logging]
    level = "INFO"
    structured = false
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

try:
    import tomli as tomllib  # Python < 3.11
except ImportError:
    import tomllib  # Python >= 3.11

from pydantic import BaseModel, Field, field_validator

from .exceptions import ConfigError, ConfigFileNotFoundError
from .precision import ALL_RESOLUTION_NAMES

__all__ = [
    "Settings",
    "DatesConfig",
    "LoggingConfig",
    "load_settings",
    "ENV_PREFIX",
]

ENV_PREFIX = "GEOTEMPORAL_"


# ============================================================================
# Configuration Models
# ============================================================================


class DatesConfig(BaseModel):
    """Date string formatting configuration."""

    delimiter: str = Field(default="-", min_length=1)
    range_separator: str = Field(default=" - ")
    default_resolution: str = Field(default="day")

    @field_validator("default_resolution")
    @classmethod
    def validate_resolution(cls, v: str) -> str:
        """Validate resolution is a known precision name."""
        if v not in ALL_RESOLUTION_NAMES:
            raise ValueError(f"default_resolution must be one of {list(ALL_RESOLUTION_NAMES)}, got '{v}'")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="WARNING")
    structured: bool = Field(default=False)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got '{v}'")
        return v_upper


class Settings(BaseModel):
    """Complete geotemporal settings."""

    dates: DatesConfig = Field(default_factory=DatesConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"extra": "forbid"}  # Reject unknown keys


# ============================================================================
# Loading Functions
# ============================================================================


def load_settings(
    toml_path: Path | str | None = None,
    env_prefix: str = ENV_PREFIX,
) -> Settings:
    """Load and validate settings from TOML and environment.

    Args:
        toml_path: Path to TOML configuration file (optional)
        env_prefix: Environment variable prefix (default: GEOTEMPORAL_)

    Returns:
        Validated Settings object

    Raises:
        ConfigFileNotFoundError: If toml_path specified but doesn't exist
        pydantic.ValidationError: If configuration is invalid
    """
    config_dict: dict[str, Any] = {}

    if toml_path is not None:
        toml_path = Path(toml_path)
        if not toml_path.exists():
            raise ConfigFileNotFoundError(
                f"Configuration file not found: {toml_path}",
                context={"path": str(toml_path)},
            )

        with open(toml_path, "rb") as f:
            config_dict = tomllib.load(f)

    config_dict = _apply_env_overrides(config_dict, env_prefix)

    return Settings(**config_dict)


def _apply_env_overrides(config: dict[str, Any], prefix: str) -> dict[str, Any]:
    """Apply environment variable overrides to config dict.

    Args:
        config: Configuration dictionary
        prefix: Environment variable prefix

    Returns:
        Configuration with environment overrides applied

    Raises:
        ConfigError: If a variable nests under a key that holds a plain value
    """
    for key, value in os.environ.items():
        if not key.startswith(prefix):
            continue

        config_key = key[len(prefix) :].lower()
        parts = config_key.split("__")

        current = config
        for part in parts[:-1]:
            if part not in current:
                current[part] = {}
            current = current[part]
            if not isinstance(current, dict):
                raise ConfigError(
                    f"Environment override {key} nests under '{part}', which is not a table",
                    context={"variable": key, "key": part},
                )

        current[parts[-1]] = _parse_env_value(value)

    return config


def _parse_env_value(value: str) -> Any:
    """Parse environment variable value to bool, int, float, or str."""
    if value.lower() in ("true", "yes"):
        return True
    if value.lower() in ("false", "no"):
        return False

    try:
        if "." in value:
            return float(value)
        return int(value)
    except ValueError:
        pass

    return value
