"""Configuration for easy-commit.

Configuration is read from the first YAML file found among:
- ./.easy-commit.yaml, ./.easy-commit.yml, ./easy-commit.yaml, ./easy-commit.yml
- the same names in the home directory

Example:

    commit:
      max_description_length: 72
      max_body_line_length: 72
      max_body_length: 500
      invalid_scope_chars: " \\t\\n()"
    timeouts:
      validation: 2s
      git_command: 5s
      context: 5m
    validator:
      worker_count: 4
    logger:
      level: INFO

Sections missing from the file keep their defaults.
"""

import re
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from easycommit.commit import ValidationConfig
from easycommit.exceptions import EasyCommitError

CONFIG_FILE_NAMES = [
    ".easy-commit.yaml",
    ".easy-commit.yml",
    "easy-commit.yaml",
    "easy-commit.yml",
]

LOG_LEVELS = ["DEBUG", "INFO", "WARN", "ERROR", "SILENT"]

_NUMBER_PATTERN = re.compile(r"\d+(?:\.\d+)?")
# "ms", "us" and "ns" must be tried before "m" and "s"
_DURATION_PART = r"(\d+(?:\.\d+)?)(ns|us|µs|ms|h|m|s)"
_DURATION_PATTERN = re.compile(f"(?:{_DURATION_PART})+")
_DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 0.001,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}


class ConfigError(EasyCommitError):
    """Raised when a configuration file cannot be read or is invalid."""

    pass


def parse_duration(value: Union[int, float, str]) -> float:
    """Convert a duration to seconds.

    Accepts plain numbers (seconds) and Go-style strings such as "500ms",
    "2s", "5m", "1h" or compound ones like "1m30s". A string without a unit
    is read as seconds.

    Args:
        value: The duration to convert.

    Returns:
        The duration in seconds.

    Raises:
        ValueError: If the value is not a valid positive duration.
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid duration: {value!r}")
    if isinstance(value, (int, float)):
        seconds = float(value)
    else:
        text = str(value).strip()
        if _NUMBER_PATTERN.fullmatch(text):
            seconds = float(text)
        elif _DURATION_PATTERN.fullmatch(text):
            seconds = sum(
                float(amount) * _DURATION_UNITS[unit] for amount, unit in re.findall(_DURATION_PART, text)
            )
        else:
            raise ValueError(f"invalid duration: {value!r}")

    if seconds <= 0:
        raise ValueError(f"duration must be positive: {value!r}")
    return seconds


class TimeoutSettings(BaseModel):
    """Timeouts in seconds."""

    model_config = ConfigDict(frozen=True)

    validation: float = 2.0
    git_command: float = 5.0
    context: float = 300.0

    @field_validator("validation", "git_command", "context", mode="before")
    @classmethod
    def parse_durations(cls, v):
        """Accept Go-style duration strings."""
        return parse_duration(v)


class ValidatorSettings(BaseModel):
    """Concurrent validator settings."""

    model_config = ConfigDict(frozen=True)

    worker_count: int = 4

    @field_validator("worker_count", mode="after")
    @classmethod
    def coerce_worker_count(cls, v: int) -> int:
        """Fall back to 4 workers for non-positive counts."""
        return v if v > 0 else 4


class LoggerSettings(BaseModel):
    """Logging settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Upper-case the level and check it is known."""
        level = str(v or "INFO").strip().upper()
        if level == "WARNING":
            level = "WARN"
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {v!r} (valid: {', '.join(LOG_LEVELS)})")
        return level


class AppConfig(BaseModel):
    """Complete easy-commit configuration."""

    model_config = ConfigDict(frozen=True)

    commit: ValidationConfig = ValidationConfig()
    timeouts: TimeoutSettings = TimeoutSettings()
    validator: ValidatorSettings = ValidatorSettings()
    logger: LoggerSettings = LoggerSettings()

    @field_validator("commit", "timeouts", "validator", "logger", mode="before")
    @classmethod
    def empty_section_is_default(cls, v):
        """Treat an empty YAML section (null) as all defaults."""
        if v is None:
            return {}
        return v


def load_config_from_dict(config_dict: dict[str, Any]) -> AppConfig:
    """Build an AppConfig from a configuration dictionary.

    Args:
        config_dict: Parsed configuration, usually from YAML.

    Returns:
        AppConfig instance.

    Raises:
        ConfigError: If a value is invalid.
    """
    try:
        return AppConfig.model_validate(config_dict)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}")


def find_config_file(
    search_dirs: Optional[list[Path]] = None,
) -> Optional[Path]:
    """Find the first existing configuration file.

    Args:
        search_dirs: Directories to search, in order. Defaults to the current
            directory followed by the home directory.

    Returns:
        Path to the configuration file, or None if none exists.
    """
    if search_dirs is None:
        search_dirs = [Path.cwd(), Path.home()]

    for directory in search_dirs:
        for name in CONFIG_FILE_NAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
    return None


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load configuration from a file, or return defaults.

    Args:
        path: Explicit configuration file. When omitted, the standard
            locations are searched.

    Returns:
        AppConfig instance.

    Raises:
        ConfigError: If the file cannot be read or contains invalid values.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            return AppConfig()
    elif not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load config from {path}: {e}")

    if not isinstance(data, dict):
        raise ConfigError(f"Failed to load config from {path}: expected a mapping at the top level")

    return load_config_from_dict(data)
