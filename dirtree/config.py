"""Persistent JSON config helpers.

Stores the preferred theme, color preference, and default depth bound.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "dirtree"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
DEFAULT_DEPTH = 1


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem/serialization errors are ignored so an unwritable config
    directory never affects tree output.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError):
        pass


def load_theme_name() -> str | None:
    """Return persisted theme name, or ``None`` when unset or not a string."""
    value = load_config().get("theme")
    return value if isinstance(value, str) and value.strip() else None


def save_theme_name(name: str) -> None:
    config = load_config()
    config["theme"] = str(name)
    save_config(config)


def load_no_color() -> bool:
    """Return persisted color preference.

    Only explicit boolean values are accepted; anything else means colors on.
    """
    value = load_config().get("no_color")
    return value if isinstance(value, bool) else False


def save_no_color(no_color: bool) -> None:
    config = load_config()
    config["no_color"] = bool(no_color)
    save_config(config)


def load_default_depth() -> int:
    """Return persisted default depth bound.

    Booleans, non-integers and values below 1 fall back to ``DEFAULT_DEPTH``.
    """
    value = load_config().get("default_depth")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return DEFAULT_DEPTH
    return value


def save_default_depth(depth: int) -> None:
    config = load_config()
    config["default_depth"] = max(1, int(depth))
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_DEPTH",
    "load_config",
    "save_config",
    "load_theme_name",
    "save_theme_name",
    "load_no_color",
    "save_no_color",
    "load_default_depth",
    "save_default_depth",
]
