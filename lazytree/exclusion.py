"""Combine hidden-file, gitignore, and explicit pattern rules into one decision."""

from __future__ import annotations

from dataclasses import dataclass

from .fs import DirEntrySnapshot
from .options import TreeOptions
from .patterns import GitignoreRule, GlobPattern, SubstringPattern, compile_patterns, matches_any


@dataclass(frozen=True)
class ExclusionPolicy:
    """Per-run exclusion rules.

    Rules are checked in a fixed order and the first one that applies wins:
    hidden names, then gitignore rules, then explicit patterns. There is no
    way to re-include an entry once a rule has excluded it.
    """

    show_hidden: bool = False
    include_gitignore: bool = False
    directories_only: bool = False
    gitignore_rules: tuple[GitignoreRule, ...] = ()
    explicit_patterns: tuple[GlobPattern | SubstringPattern, ...] = ()

    @classmethod
    def from_options(
        cls,
        options: TreeOptions,
        gitignore_rules: tuple[GitignoreRule, ...] = (),
    ) -> ExclusionPolicy:
        return cls(
            show_hidden=options.show_hidden,
            include_gitignore=options.include_gitignore,
            directories_only=options.directories_only,
            gitignore_rules=gitignore_rules,
            explicit_patterns=compile_patterns(options.exclude_patterns),
        )

    def is_excluded(self, entry: DirEntrySnapshot) -> bool:
        if not self.show_hidden and entry.name.startswith("."):
            return True
        if not self.include_gitignore and matches_any(self.gitignore_rules, entry.rel_path, entry.is_dir):
            return True
        return matches_any(self.explicit_patterns, entry.rel_path, entry.is_dir)

    def admits(self, entry: DirEntrySnapshot) -> bool:
        """Return whether ``entry`` is listed: not excluded, and a directory in dir-only mode."""
        if self.is_excluded(entry):
            return False
        return entry.is_dir or not self.directories_only


def excluded(entry: DirEntrySnapshot, policy: ExclusionPolicy) -> bool:
    return policy.is_excluded(entry)


__all__ = [
    "ExclusionPolicy",
    "excluded",
]
