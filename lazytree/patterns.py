"""Exclusion pattern compilation and matching.

Raw strings from ``-I``/``-E`` become glob or substring patterns; lines from a
``.gitignore`` become gitignore rules. Compilation never raises: malformed
input compiles to ``None`` and the caller simply skips it.

Globbing is intentionally minimal. A pattern is split once, at its first
``**`` (or else its first ``*``), and the candidate must start with the part
before the split and end with the part after it. Wildcards after the split
point are compared literally, and directory boundaries are not enforced.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GlobPattern:
    """Shell-style pattern containing at least one ``*``."""

    text: str


@dataclass(frozen=True)
class SubstringPattern:
    """Plain pattern matched by containment."""

    text: str


@dataclass(frozen=True)
class GitignoreRule:
    """One ``.gitignore`` line with anchor/dir-only markers stripped from ``text``."""

    text: str
    anchored: bool = False
    directory_only: bool = False


CompiledPattern = GlobPattern | SubstringPattern | GitignoreRule


def _is_malformed(text: str) -> bool:
    if not text or "\x00" in text:
        return True
    if not text.strip("/"):
        return True
    return "***" in text


def compile_pattern(raw: str) -> GlobPattern | SubstringPattern | None:
    """Compile one user-supplied exclude pattern, or ``None`` when unusable."""
    text = raw.strip()
    if _is_malformed(text):
        logger.debug("dropping malformed exclude pattern %r", raw)
        return None
    if "*" in text:
        return GlobPattern(text)
    return SubstringPattern(text)


def compile_patterns(raw_patterns: Iterable[str]) -> tuple[GlobPattern | SubstringPattern, ...]:
    """Compile many patterns, silently skipping the malformed ones."""
    compiled: list[GlobPattern | SubstringPattern] = []
    for raw in raw_patterns:
        pattern = compile_pattern(raw)
        if pattern is not None:
            compiled.append(pattern)
    return tuple(compiled)


def compile_gitignore_rule(line: str) -> GitignoreRule | None:
    """Compile one ``.gitignore`` line.

    Blank lines and comments yield ``None``. Negated (``!``) lines are not
    supported and are skipped too.
    """
    text = line.strip()
    if not text or text.startswith("#"):
        return None
    if text.startswith("!"):
        logger.debug("skipping unsupported negated gitignore rule %r", line)
        return None

    text = text.replace("\\", "/")
    anchored = text.startswith("/")
    directory_only = text.endswith("/")
    stem = text.strip("/")
    if _is_malformed(stem):
        logger.debug("dropping malformed gitignore rule %r", line)
        return None
    if anchored and "/" in stem:
        # Anchored rules compare against the final path segment only.
        logger.debug("anchored gitignore rule %r has a nested path and never matches", line)
    return GitignoreRule(stem, anchored=anchored, directory_only=directory_only)


def compile_gitignore(text: str) -> tuple[GitignoreRule, ...]:
    """Compile the full content of a ``.gitignore`` file."""
    rules: list[GitignoreRule] = []
    for line in text.splitlines():
        rule = compile_gitignore_rule(line)
        if rule is not None:
            rules.append(rule)
    return tuple(rules)


def normalize_path(path: str) -> str:
    """Return ``path`` with forward slashes and no leading ``./``."""
    normalized = path.replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    return normalized


def glob_match(pattern: str, text: str) -> bool:
    """Match ``text`` against ``pattern`` using a single prefix/suffix split.

    Only the first ``**`` (or first ``*``) is a wildcard; anything after it
    must appear literally at the end of ``text``. So ``*.min.*`` only matches
    names that literally end in ``.min.*``.
    """
    if pattern == "**":
        return True
    if "**" in pattern:
        prefix, suffix = pattern.split("**", 1)
    elif "*" in pattern:
        prefix, suffix = pattern.split("*", 1)
    else:
        return text == pattern
    # Stricter than a bare startswith/endswith: prefix and suffix may not overlap.
    if len(text) < len(prefix) + len(suffix):
        return False
    return text.startswith(prefix) and text.endswith(suffix)


def _final_segment(normalized: str) -> str:
    return normalized.rstrip("/").rsplit("/", 1)[-1]


def _name_matches(stem: str, name: str) -> bool:
    if "*" in stem:
        return glob_match(stem, name)
    return name == stem


def _matches_gitignore_rule(rule: GitignoreRule, normalized: str, candidates: list[str], is_directory: bool) -> bool:
    stem = rule.text
    name = _final_segment(normalized)
    if rule.directory_only and not is_directory:
        return False
    if rule.anchored:
        return _name_matches(stem, name)
    if rule.directory_only:
        return _name_matches(stem, name) or f"/{stem}" in normalized
    if "/" in stem:
        return any(stem in candidate for candidate in candidates)
    if name == stem or f"/{stem}" in normalized:
        return True
    return "*" in stem and glob_match(stem, name)


def matches(pattern: CompiledPattern, path: str, is_directory: bool) -> bool:
    """Return whether ``pattern`` matches ``path``.

    ``path`` is normalized first; directories are tried both bare and with a
    trailing slash, so ``build/`` style patterns hit the directory itself.
    """
    normalized = normalize_path(path)
    candidates = [normalized]
    if is_directory:
        candidates.append(f"{normalized}/")

    if isinstance(pattern, GitignoreRule):
        return _matches_gitignore_rule(pattern, normalized, candidates, is_directory)
    if isinstance(pattern, GlobPattern):
        if any(glob_match(pattern.text, candidate) for candidate in candidates):
            return True
        return pattern.text in normalized
    return any(pattern.text in candidate for candidate in candidates)


def matches_any(patterns: Iterable[CompiledPattern], path: str, is_directory: bool) -> bool:
    """Return whether any of ``patterns`` matches ``path``."""
    return any(matches(pattern, path, is_directory) for pattern in patterns)


__all__ = [
    "GlobPattern",
    "SubstringPattern",
    "GitignoreRule",
    "CompiledPattern",
    "compile_pattern",
    "compile_patterns",
    "compile_gitignore_rule",
    "compile_gitignore",
    "normalize_path",
    "glob_match",
    "matches",
    "matches_any",
]
