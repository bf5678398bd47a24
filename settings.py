"""JSON-based settings persistence for the dot calendar."""

import json
import logging
import os

from clock import DEFAULT_TIMEZONE

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".dot-calendar-settings.json")

DEFAULT_STYLE = {
    "width": 3024,
    "height": 1964,
    "dot_size": 22,
    "dot_gap": 6,
    "month_gap": 40,
    "label_size": 22,
    "label_gap": 8,
    "background": "#000000",
    "label": "#999999",
    "today": "#ff6b35",
    "past": "#ffffff",
    "future": "#555555",
    "top_pad": 0.25,
    "bottom_pad": 0.1,
}

_DEFAULTS = {
    "timezone": DEFAULT_TIMEZONE,
    "window_width": None,
    "window_height": None,
    "export_path": "calendar.png",
    "style": DEFAULT_STYLE,
}


def settings_path() -> str:
    return os.environ.get("DOT_CALENDAR_SETTINGS") or _SETTINGS_PATH


def _merge_style(stored: dict) -> dict:
    style = dict(DEFAULT_STYLE)
    for key, default in DEFAULT_STYLE.items():
        value = stored.get(key)
        if isinstance(default, str):
            if isinstance(value, str):
                style[key] = value
        elif isinstance(default, float):
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                style[key] = float(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            style[key] = value
    return style


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    settings["style"] = dict(DEFAULT_STYLE)
    path = settings_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: top level is not an object", path)
        return settings

    for key in ("timezone", "export_path"):
        if key in stored and isinstance(stored[key], str) and stored[key]:
            settings[key] = stored[key]
    for key in ("window_width", "window_height"):
        if key in stored and isinstance(stored[key], int) and not isinstance(stored[key], bool):
            settings[key] = stored[key]
    if "style" in stored and isinstance(stored["style"], dict):
        settings["style"] = _merge_style(stored["style"])
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(settings_path(), "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
