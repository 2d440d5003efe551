"""``perch build``: substitute ``name=value`` arguments into a pattern."""

import argparse
import sys

from perch.cli._resolve import resolve_pattern
from perch.config import PerchConfig
from perch.errors import PathBuildError


def parse_assignments(values: list[str]) -> list[tuple[str, str]]:
    """Split ``name=value`` strings into pairs.

    Raises ``ValueError`` for an argument with no ``=`` or an empty name.
    The value may be empty or contain further ``=`` characters.
    """
    pairs: list[tuple[str, str]] = []
    for item in values:
        name, sep, value = item.partition("=")
        if not sep or not name:
            msg = f"Expected name=value, got {item!r}"
            raise ValueError(msg)
        pairs.append((name, value))
    return pairs


def run_build(args: argparse.Namespace, config: PerchConfig) -> None:
    """Print the concrete path built from ``args.params``."""
    pattern = resolve_pattern(args.pattern)
    try:
        pairs = parse_assignments(args.params)
        path = pattern.create(*pairs)
    except (ValueError, PathBuildError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
    print(path)
