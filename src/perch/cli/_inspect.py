"""``perch inspect``: show the structure a pattern compiles to."""

import argparse
import json as json_module
from typing import Any

from perch.cli._resolve import resolve_pattern
from perch.config import PerchConfig
from perch.routing.pattern import PathPattern


def describe(pattern: PathPattern) -> dict[str, Any]:
    """Return the derived attributes of *pattern* as plain data."""
    expression = pattern.match_expression
    return {
        "pattern": pattern.pattern,
        "has_wildcard": pattern.has_wildcard,
        "has_parameters": pattern.has_parameters,
        "parameter_names": list(pattern.parameter_names),
        "segments": list(pattern.segments),
        "regex": expression.pattern if expression is not None else None,
    }


def run_inspect(args: argparse.Namespace, config: PerchConfig) -> None:
    """Print the derived attributes of ``args.pattern``."""
    info = describe(resolve_pattern(args.pattern))
    if config.json_output:
        print(json_module.dumps(info, indent=2))
        return

    width = max(len(key) for key in info)
    for key, value in info.items():
        print(f"{key:<{width}}  {value!r}")
