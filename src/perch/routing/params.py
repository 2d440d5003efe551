"""Placeholder syntax and parameter substitution.

Placeholders use ``{name}`` delimiters (RFC 6570 style); ``*`` is an
unnamed wildcard.
"""

import re
from collections.abc import Iterable

PARAMETER_PREFIX = "{"
PARAMETER_SUFFIX = "}"
WILDCARD = "*"

WILDCARD_REGEX = re.compile(re.escape(WILDCARD))
PARAMETER_REGEX = re.compile(
    f"{re.escape(PARAMETER_PREFIX)}(\\w+){re.escape(PARAMETER_SUFFIX)}"
)
# One alternation so a single scan sees wildcards and parameters in order
PLACEHOLDER_REGEX = re.compile(
    f"{re.escape(WILDCARD)}|{re.escape(PARAMETER_PREFIX)}(\\w+){re.escape(PARAMETER_SUFFIX)}"
)

# Capture groups substituted for each placeholder kind
WILDCARD_GROUP = "(.*?)"
PARAMETER_GROUP = "(.+?)"


def stringify_param(value: object) -> str:
    """Render a parameter value as path text."""
    return str(value)


def fill_placeholders(
    text: str,
    prefix: str,
    suffix: str,
    parameters: Iterable[tuple[str, object]],
) -> str:
    """Replace every ``prefix + name + suffix`` token in *text*.

    All occurrences of a token are replaced in a single pass, so a value
    that itself looks like a token is never substituted again. Names with
    no token in *text* are ignored; tokens with no supplied name are left
    as they are. A repeated name takes its last value.

    Example::

        >>> fill_placeholders("/a/{x}/{x}", "{", "}", [("x", 5)])
        '/a/5/5'
    """
    values = {name: stringify_param(value) for name, value in parameters}
    token = re.compile(f"{re.escape(prefix)}(\\w+){re.escape(suffix)}")
    return token.sub(lambda m: values.get(m.group(1), m.group(0)), text)
