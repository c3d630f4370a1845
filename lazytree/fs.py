"""Single-directory enumeration into display-ready snapshots."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

SORT_NONE = "none"
SORT_NAME = "name"
SORT_DIRS_FIRST = "dirsfirst"
SORT_MODES = (SORT_NONE, SORT_NAME, SORT_DIRS_FIRST)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirEntrySnapshot:
    """One child observed while listing a directory.

    ``rel_path`` is the POSIX-style path relative to the listing root and is
    what exclusion patterns are matched against.
    """

    path: Path
    name: str
    is_dir: bool
    rel_path: str


def display_name(name: str) -> str:
    """Return ``name`` as printable text.

    Names holding bytes that are not valid UTF-8 arrive surrogate-escaped;
    those bytes are replaced with U+FFFD instead of failing on output.
    """
    try:
        name.encode("utf-8")
        return name
    except UnicodeEncodeError:
        raw = name.encode("utf-8", errors="surrogateescape")
        return raw.decode("utf-8", errors="replace")


def _child_rel_path(rel_parent: str, name: str) -> str:
    return f"{rel_parent}/{name}" if rel_parent else name


def list_directory_entries(
    directory: Path,
    rel_parent: str = "",
) -> tuple[list[DirEntrySnapshot], OSError | None]:
    """List ``directory`` in enumeration order.

    Returns ``(entries, scan_error)``; ``scan_error`` is set, and ``entries``
    empty, when the directory cannot be scanned. Type checks follow symlinks.
    """
    entries: list[DirEntrySnapshot] = []
    try:
        with os.scandir(directory) as scanned:
            for child in scanned:
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                name = display_name(child.name)
                entries.append(
                    DirEntrySnapshot(
                        path=Path(child.path),
                        name=name,
                        is_dir=is_dir,
                        rel_path=_child_rel_path(rel_parent, name),
                    )
                )
    except OSError as exc:
        logger.debug("scan of %s failed: %s", directory, exc)
        return [], exc
    return entries, None


def sort_entries(entries: list[DirEntrySnapshot], mode: str = SORT_NONE) -> list[DirEntrySnapshot]:
    """Return ``entries`` in display order for ``mode``.

    ``none`` keeps enumeration order untouched.
    """
    if mode == SORT_NAME:
        return sorted(entries, key=lambda entry: entry.name.casefold())
    if mode == SORT_DIRS_FIRST:
        return sorted(entries, key=lambda entry: (not entry.is_dir, entry.name.casefold()))
    return list(entries)


__all__ = [
    "SORT_NONE",
    "SORT_NAME",
    "SORT_DIRS_FIRST",
    "SORT_MODES",
    "DirEntrySnapshot",
    "display_name",
    "list_directory_entries",
    "sort_entries",
]
