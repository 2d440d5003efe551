"""Perch CLI: match, extract, build, and inspect path patterns.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse
import sys
from typing import Any

from perch.config import LOG_LEVELS, PerchConfig


def _add_json_flag(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        default=None,
        help="Print machine-readable JSON",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    parser = argparse.ArgumentParser(
        prog="perch",
        description="Perch: compile, match, and build URL path templates.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: $PERCH_LOG_LEVEL or warning)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Shortcut for --log-level debug",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- perch match ------------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Check a path against a pattern")
    match_parser.add_argument("pattern", help="Path pattern (e.g. /users/{id})")
    match_parser.add_argument("path", help="Concrete request path")

    # -- perch extract ----------------------------------------------------
    extract_parser = subparsers.add_parser("extract", help="Extract parameters from a path")
    extract_parser.add_argument("pattern", help="Path pattern (e.g. /users/{id})")
    extract_parser.add_argument("path", help="Concrete request path")
    _add_json_flag(extract_parser)

    # -- perch build ------------------------------------------------------
    build_parser = subparsers.add_parser("build", help="Build a path from parameters")
    build_parser.add_argument("pattern", help="Path pattern (e.g. /users/{id})")
    build_parser.add_argument(
        "params",
        nargs="*",
        metavar="name=value",
        help="Placeholder values",
    )

    # -- perch inspect ----------------------------------------------------
    inspect_parser = subparsers.add_parser("inspect", help="Show how a pattern compiles")
    inspect_parser.add_argument("pattern", help="Path pattern (e.g. /files/*)")
    _add_json_flag(inspect_parser)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    overrides: dict[str, Any] = {}
    if args.verbose:
        overrides["log_level"] = "debug"
    elif args.log_level is not None:
        overrides["log_level"] = args.log_level
    if getattr(args, "json", None):
        overrides["json_output"] = True
    try:
        config = PerchConfig.from_env(**overrides)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    config.configure_logging()

    if args.command == "match":
        from perch.cli._match import run_match

        run_match(args, config)
    elif args.command == "extract":
        from perch.cli._match import run_extract

        run_extract(args, config)
    elif args.command == "build":
        from perch.cli._build import run_build

        run_build(args, config)
    elif args.command == "inspect":
        from perch.cli._inspect import run_inspect

        run_inspect(args, config)
