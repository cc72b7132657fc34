"""Configuration parsing for word cloud runs."""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

DEFAULT_CLOUD_SIZE = 10
DEFAULT_MIN_LENGTH = 1
DEFAULT_WINDOW_SIZE = 100

# CLI spelling -> field name
_KEY_ALIASES = {
    "cloudSize": "cloud_size",
    "minLength": "min_length",
    "windowSize": "window_size",
}


class ConfigError(ValueError):
    """Raised when a configuration value is out of range."""


@dataclass(frozen=True)
class CloudConfig:
    """Settings for a single run, fixed once parsed."""

    cloud_size: int = DEFAULT_CLOUD_SIZE  # max ranked entries per line
    min_length: int = DEFAULT_MIN_LENGTH  # shorter words are dropped
    window_size: int = DEFAULT_WINDOW_SIZE  # number of recent words tracked

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CloudConfig":
        """Create CloudConfig from a dict, accepting camelCase or snake_case keys."""
        names = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name in names:
                values[name] = value
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: Path) -> "CloudConfig":
        """Load configuration from a YAML file.

        An empty file gives the defaults.
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}")

        return cls.from_dict(data)

    def with_overrides(self, **overrides: Any) -> "CloudConfig":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)

    def validate(self) -> None:
        """Check value ranges.

        Raises:
            ConfigError: If any value is not an int or is out of range.
        """
        for f in fields(self):
            value = getattr(self, f.name)
            # bool is an int subclass but never a valid size
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{f.name} must be an integer, got {value!r}")

        if self.window_size < 1:
            raise ConfigError(f"window_size must be at least 1, got {self.window_size}")
        if self.cloud_size < 0:
            raise ConfigError(f"cloud_size must not be negative, got {self.cloud_size}")
        if self.min_length < 0:
            raise ConfigError(f"min_length must not be negative, got {self.min_length}")
