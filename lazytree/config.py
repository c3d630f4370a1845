"""Persistent JSON defaults for command-line options.

The file lives in the platform config directory and is only ever read.
All access is defensive: malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .fs import SORT_MODES

APP_NAME = "lazytree"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptionDefaults:
    """Option values applied before command-line flags."""

    show_hidden: bool = False
    color: bool = False
    nerd_fonts: bool = False
    directories_only: bool = False
    include_gitignore: bool = False
    no_report: bool = False
    sort_mode: str | None = None
    exclude_patterns: tuple[str, ...] = ()


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(data: dict[str, object], key: str) -> bool:
    """Only explicit booleans count; anything else falls back to ``False``."""
    value = data.get(key)
    return value if isinstance(value, bool) else False


def _load_sort_mode(data: dict[str, object]) -> str | None:
    value = data.get("sort")
    if isinstance(value, str) and value in SORT_MODES:
        return value
    return None


def _load_exclude_patterns(data: dict[str, object]) -> tuple[str, ...]:
    value = data.get("exclude")
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str) and item.strip())


def load_option_defaults() -> OptionDefaults:
    """Read option defaults from the config file, dropping invalid values."""
    data = load_config()
    return OptionDefaults(
        show_hidden=_load_bool(data, "show_hidden"),
        color=_load_bool(data, "color"),
        nerd_fonts=_load_bool(data, "nerd_fonts"),
        directories_only=_load_bool(data, "directories_only"),
        include_gitignore=_load_bool(data, "include_gitignore"),
        no_report=_load_bool(data, "no_report"),
        sort_mode=_load_sort_mode(data),
        exclude_patterns=_load_exclude_patterns(data),
    )
