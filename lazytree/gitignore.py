"""Root ``.gitignore`` loading.

Only the ``.gitignore`` directly inside the listing root is read, once, before
the walk starts. Nested ``.gitignore`` files are not consulted.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .patterns import GitignoreRule, compile_gitignore

GITIGNORE_FILENAME = ".gitignore"

logger = logging.getLogger(__name__)


def gitignore_path(root: Path) -> Path:
    """Return where the root ``.gitignore`` would live for ``root``."""
    return root / GITIGNORE_FILENAME


def read_gitignore_text(root: Path) -> str:
    """Return root ``.gitignore`` content, or ``""`` when missing/unreadable."""
    path = gitignore_path(root)
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except FileNotFoundError:
        return ""
    except OSError as exc:
        logger.debug("cannot read %s: %s", path, exc)
        return ""


def load_gitignore_rules(root: Path) -> tuple[GitignoreRule, ...]:
    """Compile the rules of the root ``.gitignore``.

    A missing file is not an error; it simply produces no rules.
    """
    rules = compile_gitignore(read_gitignore_text(root))
    logger.debug("loaded %d gitignore rule(s) from %s", len(rules), gitignore_path(root))
    return rules


__all__ = [
    "GITIGNORE_FILENAME",
    "gitignore_path",
    "read_gitignore_text",
    "load_gitignore_rules",
]
