"""Depth-bounded, filtered, depth-first tree walk.

Each directory is listed in full, filtered, and ordered before any of its
children are rendered. Counts accumulate in one ``TraversalState`` that every
recursive call mutates, so the final numbers equal the rendered rows.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from .exclusion import ExclusionPolicy
from .fs import DirEntrySnapshot, display_name, list_directory_entries, sort_entries
from .gitignore import load_gitignore_rules
from .options import TreeOptions
from .render import child_prefix, format_entry_line, format_root_line, format_summary

logger = logging.getLogger(__name__)


@dataclass
class TraversalState:
    """Running totals for one walk; counts only ever grow."""

    directories: int = 0
    files: int = 0
    failures: list[Path] = field(default_factory=list)

    @property
    def failed(self) -> bool:
        return bool(self.failures)


class TreeWalker:
    """Render the tree under ``options.root`` through ``write``."""

    def __init__(
        self,
        options: TreeOptions,
        policy: ExclusionPolicy,
        write: Callable[[str], None] = print,
    ) -> None:
        self.options = options
        self.policy = policy
        self.write = write

    def visible_children(self, directory: Path, rel_parent: str, state: TraversalState) -> list[DirEntrySnapshot] | None:
        """Return filtered, ordered children, or ``None`` when listing failed."""
        entries, scan_error = list_directory_entries(directory, rel_parent)
        if scan_error is not None:
            self.write(f"Failed to read directory: {display_name(str(directory))}")
            state.failures.append(directory)
            return None
        admitted = [entry for entry in entries if self.policy.admits(entry)]
        return sort_entries(admitted, self.options.sort_mode)

    def walk(
        self,
        directory: Path,
        state: TraversalState,
        depth: int = 0,
        prefix: str = "",
        rel_parent: str = "",
    ) -> None:
        if not self.options.allows_depth(depth):
            return

        children = self.visible_children(directory, rel_parent, state)
        if children is None:
            return

        for idx, entry in enumerate(children):
            is_last = idx == len(children) - 1
            self.write(
                format_entry_line(
                    prefix,
                    is_last,
                    entry.name,
                    entry.is_dir,
                    nerd_fonts=self.options.nerd_fonts,
                    color=self.options.color,
                )
            )
            if not entry.is_dir:
                state.files += 1
                continue

            state.directories += 1
            if self.options.allows_depth(depth + 1):
                self.walk(
                    entry.path,
                    state,
                    depth + 1,
                    child_prefix(prefix, is_last),
                    entry.rel_path,
                )

    def run(self) -> TraversalState:
        """Write the root line, the tree, and (unless suppressed) the summary."""
        state = TraversalState()
        self.write(format_root_line(display_name(str(self.options.root)), color=self.options.color))
        self.walk(self.options.root, state)
        if not self.options.no_report:
            self.write("")
            self.write(format_summary(state.directories, state.files))
        if state.failed:
            logger.debug("%d director(ies) could not be read", len(state.failures))
        return state


def build_policy(options: TreeOptions) -> ExclusionPolicy:
    """Build the exclusion policy, reading the root ``.gitignore`` when it applies."""
    gitignore_rules = () if options.include_gitignore else load_gitignore_rules(options.root)
    return ExclusionPolicy.from_options(options, gitignore_rules)


def run_tree(options: TreeOptions, write: Callable[[str], None] = print) -> TraversalState:
    """Render the whole tree for ``options`` and return the final counts."""
    return TreeWalker(options, build_policy(options), write).run()


__all__ = [
    "TraversalState",
    "TreeWalker",
    "build_policy",
    "run_tree",
]
