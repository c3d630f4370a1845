"""CLI argument parsing, option resolution, and exit-code tests."""

from __future__ import annotations

import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from lazytree import cli
from lazytree.config import OptionDefaults


class CliMainTests(unittest.TestCase):
    def setUp(self) -> None:
        patcher = mock.patch("lazytree.cli.config.load_option_defaults", return_value=OptionDefaults())
        patcher.start()
        self.addCleanup(patcher.stop)

    def _run(self, argv: list[str]) -> str:
        stdout = io.StringIO()
        with mock.patch.object(sys, "argv", ["lazytree", *argv]), mock.patch("sys.stdout", stdout):
            cli.main()
        return stdout.getvalue()

    def test_main_defaults_to_current_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a.txt").write_text("a\n", encoding="utf-8")
            previous_cwd = Path.cwd()
            try:
                os.chdir(root)
                output = self._run([])
            finally:
                os.chdir(previous_cwd)

        self.assertEqual(output, ".\n└── [FILE] a.txt\n\n0 directories, 1 files\n")

    def test_ignore_and_exclude_patterns_are_combined(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            for name in ("a.log", "b.tmp", "c.txt", "d.bak"):
                (root / name).write_text("", encoding="utf-8")

            output = self._run([str(root), "-I", "*.log|*.tmp", "--exclude", "*.bak"])

        self.assertIn("└── [FILE] c.txt", output)
        for name in ("a.log", "b.tmp", "d.bak"):
            self.assertNotIn(name, output)
        self.assertTrue(output.endswith("0 directories, 1 files\n"))

    def test_noreport_suppresses_summary(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "x").mkdir()

            output = self._run([str(root), "--noreport"])

        self.assertEqual(output, f"{root}\n└── [DIR] x\n")

    def test_unreadable_root_exits_with_partial_failure_code(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "missing"
            stdout = io.StringIO()
            with (
                mock.patch.object(sys, "argv", ["lazytree", str(missing)]),
                mock.patch("sys.stdout", stdout),
            ):
                with self.assertRaises(SystemExit) as exc_info:
                    cli.main()

        self.assertEqual(exc_info.exception.code, cli.EXIT_PARTIAL_FAILURE)
        self.assertIn(f"Failed to read directory: {missing}", stdout.getvalue())
        self.assertTrue(stdout.getvalue().endswith("0 directories, 0 files\n"))

    def test_debug_prints_resolved_configuration_first(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            with mock.patch("lazytree.cli.logging.basicConfig"):
                output = self._run([str(root), "--debug", "-L", "2", "-I", "a|b", "--noreport"])

        lines = output.splitlines()
        self.assertEqual(lines[0], f"Directory: {root}")
        self.assertIn("Depth: 2", lines)
        self.assertIn("Ignore (input): ['a|b']", lines)
        self.assertIn("Ignore (parsed): ['a', 'b']", lines)
        self.assertEqual(lines[-1], str(root))

    def test_negative_depth_is_rejected(self) -> None:
        stderr = io.StringIO()
        with mock.patch.object(sys, "argv", ["lazytree", "-L", "-1"]), mock.patch("sys.stderr", stderr):
            with self.assertRaises(SystemExit) as exc_info:
                cli.main()

        self.assertEqual(exc_info.exception.code, 2)
        self.assertIn("value must be >= 0", stderr.getvalue())


class ResolveOptionsTests(unittest.TestCase):
    def test_flags_override_and_config_patterns_come_first(self) -> None:
        args = cli.build_parser().parse_args(["src", "-a", "-L", "3", "-I", "*.o", "--sort", "name"])
        defaults = OptionDefaults(color=True, sort_mode="dirsfirst", exclude_patterns=("target",))

        options = cli.resolve_options(args, defaults)

        self.assertEqual(options.root, Path("src"))
        self.assertEqual(options.max_depth, 3)
        self.assertTrue(options.show_hidden)
        self.assertTrue(options.color)
        self.assertFalse(options.nerd_fonts)
        self.assertEqual(options.sort_mode, "name")
        self.assertEqual(options.exclude_patterns, ("target", "*.o"))

    def test_config_sort_applies_when_flag_missing(self) -> None:
        args = cli.build_parser().parse_args([])
        options = cli.resolve_options(args, OptionDefaults(sort_mode="dirsfirst"))
        self.assertEqual(options.sort_mode, "dirsfirst")
        self.assertIsNone(options.max_depth)
        self.assertEqual(options.root, Path("."))

    def test_repeated_pattern_flags_accumulate(self) -> None:
        args = cli.build_parser().parse_args(["-I", "a|b", "-I", "c", "-E", "d,e"])
        options = cli.resolve_options(args, OptionDefaults())
        self.assertEqual(options.exclude_patterns, ("a", "b", "c", "d", "e"))


if __name__ == "__main__":
    unittest.main()
