"""Tests for tree row formatting."""

from __future__ import annotations

import unittest

from lazytree.render import (
    DIR_ICON,
    FILE_ICON,
    TreeTheme,
    child_prefix,
    format_entry_line,
    format_root_line,
    format_summary,
)


class FormatEntryLineTests(unittest.TestCase):
    def test_interior_and_last_connectors(self) -> None:
        self.assertEqual(format_entry_line("", False, "a.txt", False), "├── [FILE] a.txt")
        self.assertEqual(format_entry_line("", True, "b", True), "└── [DIR] b")

    def test_prefix_is_prepended(self) -> None:
        self.assertEqual(format_entry_line("│   ", True, "x.py", False), "│   └── [FILE] x.py")

    def test_nerd_font_icons_replace_tags(self) -> None:
        self.assertEqual(format_entry_line("", False, "src", True, nerd_fonts=True), f"├── {DIR_ICON}src")
        self.assertEqual(format_entry_line("", True, "a", False, nerd_fonts=True), f"└── {FILE_ICON}a")

    def test_color_wraps_only_the_name(self) -> None:
        self.assertEqual(
            format_entry_line("", False, "src", True, color=True),
            "├── [DIR] \033[34msrc\033[0m",
        )
        self.assertEqual(
            format_entry_line("", True, "a.py", False, color=True),
            "└── [FILE] \033[32ma.py\033[0m",
        )

    def test_custom_theme(self) -> None:
        theme = TreeTheme(directory="<d>", file="<f>", reset="</>")
        self.assertEqual(format_entry_line("", True, "a", False, color=True, theme=theme), "└── [FILE] <f>a</>")


class PrefixAndSummaryTests(unittest.TestCase):
    def test_child_prefix_depends_on_last_flag(self) -> None:
        self.assertEqual(child_prefix("", False), "│   ")
        self.assertEqual(child_prefix("│   ", True), "│       ")

    def test_root_line_and_summary(self) -> None:
        self.assertEqual(format_root_line("."), ".")
        self.assertEqual(format_root_line(".", color=True), "\033[34m.\033[0m")
        self.assertEqual(format_summary(1, 2), "1 directories, 2 files")


if __name__ == "__main__":
    unittest.main()
