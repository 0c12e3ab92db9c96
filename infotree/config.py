"""Persistent JSON config helpers.

Stores the UI theme, Pygments style, default expansion depth, and default
snapshot path. Malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "infotree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_DEPTH = 2
DEFAULT_STYLE = "monokai"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are ignored so an unwritable config never breaks a run.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def _load_string(key: str) -> str | None:
    value = load_config().get(key)
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def _save_string(key: str, value: str) -> None:
    stripped = str(value).strip()
    if not stripped:
        return
    config = load_config()
    config[key] = stripped
    save_config(config)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    return _load_string("theme")


def save_theme_name(theme_name: str) -> None:
    _save_string("theme", theme_name)


def load_style() -> str:
    """Load the Pygments style used for reference values."""
    return _load_string("style") or DEFAULT_STYLE


def save_style(style: str) -> None:
    _save_string("style", style)


def load_snapshot_path() -> Path | None:
    """Load the default snapshot path used when the CLI gets none."""
    value = _load_string("snapshot")
    return Path(value).expanduser() if value is not None else None


def save_snapshot_path(path: Path) -> None:
    _save_string("snapshot", str(path))


def load_default_depth() -> int:
    """Return persisted print depth.

    Booleans, non-integers, and values below ``1`` fall back to
    ``DEFAULT_DEPTH``.
    """
    value = load_config().get("depth")
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return DEFAULT_DEPTH
    return value


def save_default_depth(depth: int) -> None:
    if depth < 1:
        return
    config = load_config()
    config["depth"] = int(depth)
    save_config(config)
