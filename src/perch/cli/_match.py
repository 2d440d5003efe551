"""``perch match`` and ``perch extract``: test a path against a pattern."""

import argparse
import json as json_module
import sys

from perch.cli._resolve import resolve_pattern
from perch.config import PerchConfig
from perch.errors import PathMismatchError


def run_match(args: argparse.Namespace, config: PerchConfig) -> None:
    """Print ``true`` or ``false``; exit 1 when the path does not match."""
    pattern = resolve_pattern(args.pattern)
    matched = pattern.matches(args.path)
    print("true" if matched else "false")
    if not matched:
        raise SystemExit(1)


def run_extract(args: argparse.Namespace, config: PerchConfig) -> None:
    """Print the parameters captured from ``args.path``.

    Text output is one ``name=value`` line per parameter, in placeholder
    order. With ``--json`` the parameters are printed as one object.
    """
    pattern = resolve_pattern(args.pattern)
    try:
        params = pattern.extract_parameters(args.path)
    except PathMismatchError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if config.json_output:
        print(json_module.dumps(params))
        return
    for name, value in params.items():
        print(f"{name}={value}")
