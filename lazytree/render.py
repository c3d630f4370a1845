"""Tree line formatting: connectors, prefixes, type markers, and colors."""

from __future__ import annotations

from dataclasses import dataclass

BRANCH = "├── "
LAST_BRANCH = "└── "
VERTICAL = "│   "
SPACER = "    "

DIR_TAG = "[DIR] "
FILE_TAG = "[FILE] "
# Nerd Font folder / file glyphs.
DIR_ICON = "\uf07b "
FILE_ICON = "\uf15b "


@dataclass(frozen=True)
class TreeTheme:
    """ANSI palette used for entry names."""

    directory: str
    file: str
    reset: str


DEFAULT_THEME = TreeTheme(
    directory="\033[34m",
    file="\033[32m",
    reset="\033[0m",
)


def connector(is_last: bool) -> str:
    return LAST_BRANCH if is_last else BRANCH


def child_prefix(prefix: str, is_last: bool) -> str:
    """Return the prefix for the children of an entry drawn with ``prefix``."""
    return prefix + (SPACER if is_last else VERTICAL)


def type_marker(is_dir: bool, nerd_fonts: bool) -> str:
    if nerd_fonts:
        return DIR_ICON if is_dir else FILE_ICON
    return DIR_TAG if is_dir else FILE_TAG


def colorize(name: str, is_dir: bool, theme: TreeTheme | None = None) -> str:
    active_theme = theme or DEFAULT_THEME
    color = active_theme.directory if is_dir else active_theme.file
    return f"{color}{name}{active_theme.reset}"


def format_entry_line(
    prefix: str,
    is_last: bool,
    name: str,
    is_dir: bool,
    nerd_fonts: bool = False,
    color: bool = False,
    theme: TreeTheme | None = None,
) -> str:
    """Render one entry row, e.g. ``│   ├── [FILE] main.py``."""
    display = colorize(name, is_dir, theme) if color else name
    return f"{prefix}{connector(is_last)}{type_marker(is_dir, nerd_fonts)}{display}"


def format_root_line(label: str, color: bool = False, theme: TreeTheme | None = None) -> str:
    return colorize(label, True, theme) if color else label


def format_summary(directories: int, files: int) -> str:
    return f"{directories} directories, {files} files"


__all__ = [
    "BRANCH",
    "LAST_BRANCH",
    "VERTICAL",
    "SPACER",
    "DIR_TAG",
    "FILE_TAG",
    "DIR_ICON",
    "FILE_ICON",
    "TreeTheme",
    "DEFAULT_THEME",
    "connector",
    "child_prefix",
    "type_marker",
    "colorize",
    "format_entry_line",
    "format_root_line",
    "format_summary",
]
