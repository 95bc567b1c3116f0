from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict

from csv_plotter.config.model import AppSettings, DEFAULT_PALETTE
from csv_plotter.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

_POSITIVE_INT_KEYS = ("chart_width", "chart_height", "max_points", "max_upload_bytes", "session_limit")


def resolve_config_root(default: Path | str = Path("config")) -> Path:
    """CSV_PLOTTER_CONFIG_ROOT wins over the default 'config' directory."""
    return Path(os.environ.get("CSV_PLOTTER_CONFIG_ROOT") or default)


def settings_from_dict(raw: Dict[str, Any]) -> AppSettings:
    """
    Build AppSettings from a parsed global.json mapping.

    Missing keys fall back to the AppSettings defaults.

    :raises ConfigError: if a numeric setting is not a positive integer or the palette is empty
    """
    if not isinstance(raw, dict):
        raise ConfigError(f"global.json must contain a JSON object, got {type(raw).__name__}")

    defaults = AppSettings()
    values: Dict[str, Any] = {}

    for key in _POSITIVE_INT_KEYS:
        value = raw.get(key, getattr(defaults, key))
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ConfigError(f"'{key}' must be a positive integer, got {value!r}")
        values[key] = value

    palette = raw.get("palette", list(DEFAULT_PALETTE))
    if not isinstance(palette, list) or not palette or not all(isinstance(c, str) for c in palette):
        raise ConfigError("'palette' must be a non-empty list of colour strings")

    return AppSettings(
        ui_title=str(raw.get("ui_title", defaults.ui_title)),
        subtitle=str(raw.get("subtitle", defaults.subtitle)),
        palette=tuple(palette),
        **values,
    )


def load_app_settings(root: Path) -> AppSettings:
    """
    Load application settings from a config directory.

    Expected structure:

        root/
            global.json

    :param root: Directory containing 'global.json'.
    :return: An AppSettings instance.
    :raises FileNotFoundError: if global.json does not exist.
    :raises ConfigError: if global.json is not valid JSON or holds invalid values.
    """
    logger.info(
        "Loading global config",
        extra={"config_root": str(root)},
    )

    global_path = Path(root) / "global.json"
    if not global_path.is_file():
        raise FileNotFoundError(f"File not found at {global_path}")

    try:
        with global_path.open() as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {global_path}: {e}") from e

    settings = settings_from_dict(raw)

    logger.info(
        "Global config loaded",
        extra={
            "config_root": str(root),
            "chart_width": settings.chart_width,
            "max_points": settings.max_points,
        },
    )
    return settings
