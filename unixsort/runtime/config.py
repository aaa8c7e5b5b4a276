"""Persistent JSON config helpers.

Stores settings documents keyed by plugin id.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "unixsort"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH
SETTINGS_KEY = "settings"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Any filesystem/serialization error is ignored to keep runtime behavior
    non-fatal when config cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except Exception:
        pass


def load_settings_values(plugin_id: str) -> dict[str, object]:
    """Return stored user values for ``plugin_id``; ``{}`` when absent or invalid."""
    settings = load_config().get(SETTINGS_KEY)
    if not isinstance(settings, dict):
        return {}
    values = settings.get(plugin_id)
    return dict(values) if isinstance(values, dict) else {}


def save_settings_value(plugin_id: str, key: str, value: object) -> None:
    """Persist one user value for ``plugin_id``, keeping other documents intact."""
    config = load_config()
    settings = config.get(SETTINGS_KEY)
    if not isinstance(settings, dict):
        settings = {}
    values = settings.get(plugin_id)
    if not isinstance(values, dict):
        values = {}
    values[key] = value
    settings[plugin_id] = values
    config[SETTINGS_KEY] = settings
    save_config(config)
