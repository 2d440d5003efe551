"""Pattern resolution shared by every ``perch`` subcommand."""

import logging
import sys

from perch.errors import InvalidPatternError
from perch.routing.pattern import PathPattern

logger = logging.getLogger("perch.cli")


def resolve_pattern(text: str) -> PathPattern:
    """Compile *text*, exiting with status 1 if it is not a valid pattern."""
    try:
        return PathPattern(text)
    except InvalidPatternError as exc:
        logger.debug("Rejected pattern %r (rule=%s)", exc.pattern, exc.rule)
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
