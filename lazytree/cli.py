"""Command-line front door for lazytree.

Parses CLI options, merges persisted defaults, and resolves one
``TreeOptions``. Then renders the tree to stdout.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from . import config
from .fs import SORT_MODES, SORT_NONE, display_name
from .options import TreeOptions, collect_patterns
from .render import DIR_ICON, FILE_ICON
from .walker import run_tree

EXIT_PARTIAL_FAILURE = 1


def _non_negative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazytree",
        description="Display a directory tree with exclusions.",
    )
    parser.add_argument("dir", nargs="?", default=".", help="The directory to display (default: .).")
    parser.add_argument("-a", "--all", action="store_true", help="Show hidden (dot) files and directories.")
    parser.add_argument(
        "-b",
        "--nerd-fonts",
        action="store_true",
        help="Use Nerd Fonts icons instead of [DIR] and [FILE].",
    )
    parser.add_argument("-C", "--color", action="store_true", help="Enable color output.")
    parser.add_argument("-d", "--dironly", action="store_true", help="List directories only.")
    parser.add_argument(
        "-L",
        "--depth",
        type=_non_negative_int,
        default=None,
        help="Maximum depth to display (default: unbounded).",
    )
    parser.add_argument(
        "-I",
        "--ignore",
        action="append",
        default=[],
        metavar="PATTERNS",
        help="Pipe-separated patterns to ignore.",
    )
    parser.add_argument(
        "-E",
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERNS",
        help="Comma-separated glob patterns to exclude.",
    )
    parser.add_argument("--noreport", action="store_true", help="Turn off the file/directory count at the end.")
    parser.add_argument(
        "--include-gitignore",
        action="store_true",
        help="Show entries that the root .gitignore would hide.",
    )
    parser.add_argument(
        "--sort",
        choices=SORT_MODES,
        default=None,
        help="Display order (default: filesystem order).",
    )
    parser.add_argument("--debug", action="store_true", help="Print the resolved configuration first.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def resolve_options(args: argparse.Namespace, defaults: config.OptionDefaults) -> TreeOptions:
    """Merge parsed flags over persisted defaults.

    Boolean flags can only switch options on; config ``exclude`` patterns come
    before the command-line ones.
    """
    sort_mode = args.sort or defaults.sort_mode or SORT_NONE
    return TreeOptions(
        root=Path(args.dir),
        max_depth=args.depth,
        show_hidden=args.all or defaults.show_hidden,
        nerd_fonts=args.nerd_fonts or defaults.nerd_fonts,
        color=args.color or defaults.color,
        directories_only=args.dironly or defaults.directories_only,
        no_report=args.noreport or defaults.no_report,
        exclude_patterns=defaults.exclude_patterns + collect_patterns(args.ignore, args.exclude),
        include_gitignore=args.include_gitignore or defaults.include_gitignore,
        sort_mode=sort_mode,
        debug=args.debug,
    )


def debug_lines(options: TreeOptions, args: argparse.Namespace) -> list[str]:
    """Describe the resolved configuration, one ``Label: value`` per line."""
    lines = [
        f"Directory: {display_name(str(options.root))}",
        f"All: {options.show_hidden}",
        f"Nerd Fonts: {options.nerd_fonts}",
    ]
    if options.nerd_fonts:
        lines.append(f"Directory icon: {DIR_ICON}")
        lines.append(f"File icon: {FILE_ICON}")
    lines.extend(
        [
            f"Color: {options.color}",
            f"Dironly: {options.directories_only}",
            f"Depth: {'unbounded' if options.max_depth is None else options.max_depth}",
            f"Ignore (input): {args.ignore + args.exclude}",
            f"Ignore (parsed): {list(options.exclude_patterns)}",
            f"Include gitignore: {options.include_gitignore}",
            f"Sort: {options.sort_mode}",
            f"No-report: {options.no_report}",
            f"Config: {config.CONFIG_PATH}",
        ]
    )
    return lines


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print the tree.

    Exits with ``EXIT_PARTIAL_FAILURE`` when any directory could not be read;
    the rest of the tree is still printed.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )

    options = resolve_options(args, config.load_option_defaults())
    if options.debug:
        for line in debug_lines(options, args):
            print(line)

    state = run_tree(options)
    if state.failed:
        raise SystemExit(EXIT_PARTIAL_FAILURE)


if __name__ == "__main__":
    main()
