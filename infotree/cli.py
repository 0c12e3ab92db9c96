"""Command-line front door for infotree.

Loads a JSON snapshot backend, resolves the requested symbol or file, and
prints its info tree expanded to the requested depth.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .backend import SnapshotBackend
from .errors import InfoTreeError
from .registry import ExtensionRegistry, register_info_tree
from .render import render_tree_lines
from .tree_model.types import Focus
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="infotree",
        description="Print the info tree (properties and references) of a symbol or file.",
    )
    parser.add_argument(
        "snapshot",
        nargs="?",
        default=None,
        help="Path to a JSON index snapshot. Defaults to the configured snapshot.",
    )
    focus = parser.add_mutually_exclusive_group(required=True)
    focus.add_argument("--symbol", metavar="ID", help="Symbol id to show.")
    focus.add_argument("--file", metavar="ID", help="File id to show.")
    parser.add_argument(
        "--depth",
        type=_positive_int,
        default=None,
        help="Levels to print, 1 = top-level rows only (default: configured depth).",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--style", default=None, help="Pygments style name for reference values.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--verbose", action="store_true", help="Log backend queries to stderr.")
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _resolve_focus(backend: SnapshotBackend, args: argparse.Namespace) -> Focus:
    if args.symbol is not None:
        return backend.get_symbol(args.symbol)
    return backend.get_file(args.file)


def render_info_tree(
    snapshot: Path,
    args: argparse.Namespace,
    use_color: bool,
) -> str:
    """Load ``snapshot`` and return the printed tree for the selected focus."""
    backend = SnapshotBackend.from_path(snapshot)
    registry = ExtensionRegistry()
    register_info_tree(registry, backend)

    focus = _resolve_focus(backend, args)
    nodes = registry.render(focus)

    depth = args.depth if args.depth is not None else config.load_default_depth()
    theme = resolve_theme(args.theme or config.load_theme_name(), no_color=not use_color)
    style = (args.style or config.load_style()) if use_color else None
    lines = render_tree_lines(nodes, depth, theme, style)
    return "".join(line + "\n" for line in lines)


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and print an info tree.

    Backend failures (unknown ids, unreadable snapshots, malformed
    references) exit with a one-line message.
    """
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    snapshot = Path(args.snapshot) if args.snapshot is not None else config.load_snapshot_path()
    if snapshot is None:
        raise SystemExit("No snapshot given and none configured.")
    if not snapshot.exists():
        raise SystemExit(f"Snapshot not found: {snapshot}")

    use_color = not args.no_color and sys.stdout.isatty()
    try:
        output = render_info_tree(snapshot, args, use_color)
    except InfoTreeError as exc:
        raise SystemExit(f"infotree: {exc}") from exc
    sys.stdout.write(output)


if __name__ == "__main__":
    main()
