"""Resolved per-run options."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .fs import SORT_NONE

IGNORE_SEPARATOR = "|"
EXCLUDE_SEPARATOR = ","


@dataclass(frozen=True)
class TreeOptions:
    """Display and filtering options, built once and never mutated.

    ``max_depth`` of ``None`` means unbounded. Depth 0 lists the root's
    immediate children without expanding them.
    """

    root: Path = Path(".")
    max_depth: int | None = None
    show_hidden: bool = False
    nerd_fonts: bool = False
    color: bool = False
    directories_only: bool = False
    no_report: bool = False
    exclude_patterns: tuple[str, ...] = ()
    include_gitignore: bool = False
    sort_mode: str = SORT_NONE
    debug: bool = False

    def allows_depth(self, depth: int) -> bool:
        """Return whether entries at ``depth`` may be listed."""
        return self.max_depth is None or depth <= self.max_depth


def split_patterns(raw: str | None, separator: str) -> list[str]:
    """Split one ``-I``/``-E`` argument into non-empty pattern strings."""
    if not raw:
        return []
    return [part for part in raw.split(separator) if part.strip()]


def collect_patterns(
    ignore_args: Iterable[str] = (),
    exclude_args: Iterable[str] = (),
) -> tuple[str, ...]:
    """Merge pipe-separated ``-I`` and comma-separated ``-E`` arguments."""
    patterns: list[str] = []
    for raw in ignore_args:
        patterns.extend(split_patterns(raw, IGNORE_SEPARATOR))
    for raw in exclude_args:
        patterns.extend(split_patterns(raw, EXCLUDE_SEPARATOR))
    return tuple(patterns)


__all__ = [
    "IGNORE_SEPARATOR",
    "EXCLUDE_SEPARATOR",
    "TreeOptions",
    "split_patterns",
    "collect_patterns",
]
