"""Configuration management utilities."""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import json5
from dotenv import load_dotenv
from PySide6.QtGui import QColor

from phosphor_icons.core.exceptions import ConfigurationError
from phosphor_icons.core.models import IconStyle
from phosphor_icons.icons.constants import (
    DEFAULT_EXTENSION,
    DEFAULT_ICON_SIZE,
    DEFAULT_NAMESPACE,
    DEFAULT_STYLE,
    ICON_COLOR_BLACK,
)

SETTINGS_FILE_ENV = "PHOSPHOR_ICONS_SETTINGS"

ENV_VARS = {
    "icons_dir": "PHOSPHOR_ICONS_DIR",
    "namespace": "PHOSPHOR_ICONS_NAMESPACE",
    "extension": "PHOSPHOR_ICONS_EXTENSION",
    "default_style": "PHOSPHOR_ICONS_DEFAULT_STYLE",
    "default_color": "PHOSPHOR_ICONS_DEFAULT_COLOR",
    "icon_size": "PHOSPHOR_ICONS_SIZE",
    "log_level": "PHOSPHOR_ICONS_LOG_LEVEL",
}


def safe_load_json(file_path: Path) -> Dict[str, Any]:
    """Load JSON file with optional comment support."""
    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()

        return json5.loads(content)

    except FileNotFoundError:
        raise ConfigurationError(f"Settings file not found: {file_path}")
    except (json.JSONDecodeError, ValueError) as e:
        raise ConfigurationError(f"Invalid JSON in settings file: {e}")


@dataclass
class IconSettings:
    """Icon library configuration."""

    icons_dir: Optional[str] = None
    namespace: str = DEFAULT_NAMESPACE
    extension: str = DEFAULT_EXTENSION
    default_style: str = DEFAULT_STYLE.value
    default_color: str = ICON_COLOR_BLACK
    icon_size: int = DEFAULT_ICON_SIZE
    log_level: str = "WARNING"

    @property
    def style(self) -> IconStyle:
        return IconStyle(self.default_style)

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "IconSettings":
        """Create settings from dictionary."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"Unknown settings: {', '.join(sorted(unknown))}")
        return cls(**data)


def load_settings(
    env_file: Optional[str] = None, settings_file: Optional[str] = None
) -> IconSettings:
    """Load settings from a settings file and environment variables.

    The settings file is JSON with comments allowed; its "icons" section
    holds the values. Environment variables override the file. A .env file
    is only read when env_file is given.
    """
    if env_file:
        load_dotenv(env_file, override=True)

    data: Dict[str, Any] = {}
    settings_file = settings_file or os.getenv(SETTINGS_FILE_ENV)
    if settings_file:
        loaded = safe_load_json(Path(settings_file))
        if not isinstance(loaded, dict):
            raise ConfigurationError("Settings file must hold an object")
        section = loaded.get("icons", {})
        if not isinstance(section, dict):
            raise ConfigurationError("'icons' section must be an object")
        data.update(section)

    for name, env_var in ENV_VARS.items():
        value = os.getenv(env_var)
        if value:
            data[name] = value

    if "icon_size" in data:
        try:
            data["icon_size"] = int(data["icon_size"])
        except (TypeError, ValueError):
            raise ConfigurationError(f"icon_size must be an integer, got {data['icon_size']!r}")

    settings = IconSettings.from_dict(data)
    validate_settings(settings)
    return settings


def validate_settings(settings: IconSettings) -> None:
    """Validate settings values."""

    if not settings.namespace or settings.namespace.startswith(".") or settings.namespace.endswith("."):
        raise ConfigurationError(f"Invalid resource namespace: {settings.namespace!r}")

    if not settings.extension or "." in settings.extension:
        raise ConfigurationError(f"Invalid resource extension: {settings.extension!r}")

    try:
        IconStyle(settings.default_style)
    except ValueError:
        raise ConfigurationError(f"Unsupported style variant: {settings.default_style!r}")

    if not QColor(settings.default_color).isValid():
        raise ConfigurationError(f"Invalid default color: {settings.default_color!r}")

    if settings.icon_size <= 0:
        raise ConfigurationError("icon_size must be positive")

    if not isinstance(logging.getLevelName(settings.log_level.upper()), int):
        raise ConfigurationError(f"Invalid log level: {settings.log_level!r}")

    if settings.icons_dir and not Path(settings.icons_dir).is_dir():
        raise ConfigurationError(f"Icons directory not found: {settings.icons_dir}")
