"""Configuration models and helpers for project scans."""

from __future__ import annotations

import logging
import tomllib
from dataclasses import dataclass, replace
from datetime import timedelta
from pathlib import Path
from typing import Any, Optional

from .engine import max_gap_from_minutes
from .paths import get_config_path

logger = logging.getLogger(__name__)

ABLETON_SUFFIX = ".als"

_SETTING_TYPES: dict[str, type] = {
    "suffix": str,
    "max_minutes_between_saves": int,
}


class ConfigError(ValueError):
    """Raised when a settings file cannot be used."""


@dataclass(slots=True)
class ScanSettings:
    """Runtime configuration for a project scan."""

    directory: Path = Path(".")
    suffix: str = ABLETON_SUFFIX
    max_minutes_between_saves: int = 60

    @property
    def max_gap(self) -> timedelta:
        return max_gap_from_minutes(self.max_minutes_between_saves)

    @classmethod
    def from_options(
        cls,
        directory: Path,
        suffix: Optional[str] = None,
        max_minutes_between_saves: Optional[int] = None,
        config_path: Optional[Path] = None,
    ) -> "ScanSettings":
        """Merge CLI options over the settings file over the defaults."""
        settings = replace(cls(directory=Path(directory)), **load_settings_file(config_path))
        if suffix is not None:
            settings.suffix = suffix
        if max_minutes_between_saves is not None:
            settings.max_minutes_between_saves = max_minutes_between_saves
        return settings


def load_settings_file(path: Optional[Path] = None) -> dict[str, Any]:
    """Read overrides from a TOML settings file.

    Without an explicit ``path`` the per-user file is used if it exists.
    """
    explicit = path is not None
    path = Path(path) if explicit else get_config_path()
    if not path.is_file():
        if explicit:
            raise ConfigError(f"Settings file not found: {path}")
        return {}

    try:
        with path.open("rb") as fh:
            data = tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid settings file {path}: {exc}") from exc

    unknown = sorted(set(data) - set(_SETTING_TYPES))
    if unknown:
        raise ConfigError(f"Unknown settings in {path}: {', '.join(unknown)}")
    for key, value in data.items():
        expected = _SETTING_TYPES[key]
        # bool is a subclass of int; reject it explicitly.
        if not isinstance(value, expected) or isinstance(value, bool):
            raise ConfigError(
                f"Setting {key!r} in {path} must be of type {expected.__name__}"
            )
    logger.debug("Loaded settings from %s: %s", path, data)
    return data
