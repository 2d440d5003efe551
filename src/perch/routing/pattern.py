"""PathPattern: compiled path template with match, extract, and build.

Patterns mix literal text, the ``*`` wildcard, and ``{name}`` placeholders::

    pattern = PathPattern("/users/{id}")
    pattern.matches("/users/42")             # True
    pattern.extract_parameters("/users/42")  # {"id": "42"}
    pattern.create(id=7)                     # "/users/7"

Wildcards capture but are positional, never named, so they are excluded
from extracted parameters and make a pattern impossible to build from.
"""

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from perch.errors import InvalidPatternError, PathBuildError, PathMismatchError
from perch.routing.params import (
    PARAMETER_GROUP,
    PARAMETER_PREFIX,
    PARAMETER_SUFFIX,
    PLACEHOLDER_REGEX,
    WILDCARD,
    WILDCARD_GROUP,
    fill_placeholders,
)

logger = logging.getLogger("perch.routing")


def _validate(pattern: str) -> None:
    if not (pattern.startswith("/") or pattern.startswith(WILDCARD)):
        raise InvalidPatternError(
            pattern, "prefix", f"'{pattern}' must start with '/' or '{WILDCARD}'"
        )
    if ":" in pattern:
        raise InvalidPatternError(
            pattern,
            "colon",
            f"Variables have {{var}} format. Path cannot have ':' {pattern}",
        )


def _scan(pattern: str) -> tuple[tuple[str, ...], tuple[str, ...], str]:
    """Split *pattern* into names, literal segments, and regex source.

    All three come from one left-to-right pass so capture group ``i``
    always belongs to ``names[i]``. Wildcards get the name ``""``.
    """
    names: list[str] = []
    segments: list[str] = []
    source: list[str] = []
    pos = 0
    for m in PLACEHOLDER_REGEX.finditer(pattern):
        literal = pattern[pos : m.start()]
        segments.append(literal)
        source.append(literal)
        name = m.group(1)
        if name is None:
            names.append("")
            source.append(WILDCARD_GROUP)
        else:
            names.append(name)
            source.append(PARAMETER_GROUP)
        pos = m.end()
    tail = pattern[pos:]
    segments.append(tail)
    source.append(tail)
    # End anchor only; fullmatch() supplies the start boundary
    source.append("$")
    return tuple(names), tuple(segments), "".join(source)


_QUANTIFIER_REGEX = re.compile(r"[?+]|\{\d")


def _optional_group_reason(segments: tuple[str, ...]) -> str | None:
    """Return why a placeholder group could capture nothing, or ``None``.

    ``segments[i]`` is the literal before placeholder ``i``. A placeholder
    is optional when the literal after it starts with a quantifier, or when
    any literal holds an unescaped alternation. Literal groups never reach
    here: they already fail the group-count check.
    """
    for index, literal in enumerate(segments):
        if index > 0 and _QUANTIFIER_REGEX.match(literal):
            return "applies a quantifier to a placeholder"
        escaped = False
        for char in literal:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == "|":
                return "contains an alternation"
    return None


@dataclass(frozen=True, slots=True)
class PathPattern:
    """An immutable, validated path template.

    Identity is the pattern string. Every derived attribute is computed
    once at construction, so instances are safe to share across threads.

    Raises ``InvalidPatternError`` if the pattern does not start with
    ``/`` or ``*``, contains ``:``, or does not compile.
    """

    pattern: str
    has_wildcard: bool = field(init=False, repr=False, compare=False)
    has_parameters: bool = field(init=False, repr=False, compare=False)
    parameter_names: tuple[str, ...] = field(init=False, repr=False, compare=False)
    segments: tuple[str, ...] = field(init=False, repr=False, compare=False)
    match_expression: re.Pattern[str] | None = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        _validate(self.pattern)
        names, segments, source = _scan(self.pattern)

        has_wildcard = WILDCARD in self.pattern
        has_parameters = any(names)
        expression: re.Pattern[str] | None = None
        if has_wildcard or has_parameters:
            try:
                expression = re.compile(source)
            except re.error as exc:
                msg = f"'{self.pattern}' does not compile to a valid expression: {exc}"
                raise InvalidPatternError(self.pattern, "regex", msg) from exc
            if expression.groups != len(names):
                msg = (
                    f"'{self.pattern}' has {expression.groups} capture groups "
                    f"for {len(names)} placeholders; literal groups are not allowed"
                )
                raise InvalidPatternError(self.pattern, "regex", msg)
            reason = _optional_group_reason(segments)
            if reason is not None:
                msg = f"'{self.pattern}' {reason}; every placeholder must always capture"
                raise InvalidPatternError(self.pattern, "regex", msg)
            logger.debug("Compiled %r -> %r", self.pattern, source)

        object.__setattr__(self, "has_wildcard", has_wildcard)
        object.__setattr__(self, "has_parameters", has_parameters)
        object.__setattr__(self, "parameter_names", names)
        object.__setattr__(self, "segments", segments)
        object.__setattr__(self, "match_expression", expression)

    def __str__(self) -> str:
        return self.pattern

    def matches(self, path: str) -> bool:
        """Return whether the whole of *path* matches this pattern.

        Patterns without placeholders compare by exact equality.
        """
        if self.match_expression is None:
            return path == self.pattern
        return self.match_expression.fullmatch(path) is not None

    def extract_parameters(self, path: str) -> dict[str, str]:
        """Return the named placeholder values captured from *path*.

        Wildcard captures are dropped. If a name repeats, the rightmost
        occurrence wins.

        Raises ``PathMismatchError`` if *path* does not match.
        """
        if self.match_expression is None:
            if path != self.pattern:
                raise PathMismatchError(self.pattern, path)
            return {}

        found = self.match_expression.fullmatch(path)
        if found is None:
            raise PathMismatchError(self.pattern, path)
        if not self.has_parameters:
            return {}

        params: dict[str, str] = {}
        for name, value in zip(self.parameter_names, found.groups(), strict=True):
            if name:
                params[name] = value
        return params

    def create(self, *parameters: object, **named: object) -> str:
        """Build a concrete path by substituting placeholder values.

        Accepts ``(name, value)`` pairs, a single mapping, keyword
        arguments, or a mix of pairs and keywords::

            PathPattern("/a/{x}/{y}").create(("x", 1), ("y", 2))
            PathPattern("/a/{x}/{y}").create({"x": 1, "y": 2})
            PathPattern("/a/{x}/{y}").create(x=1, y=2)

        Values are rendered with ``str()``. A name used by several
        placeholders is supplied once and fills all of them.

        Raises ``PathBuildError`` if the pattern has wildcards, or the
        supplied names do not cover the placeholder names exactly.
        """
        pairs = _as_pairs(parameters, named)
        expected_names = dict.fromkeys(n for n in self.parameter_names if n)
        supplied = {name for name, _ in pairs}
        if (
            self.has_wildcard
            or len(pairs) != len(expected_names)
            or supplied != set(expected_names)
        ):
            # Wildcard patterns report every placeholder position
            if self.has_wildcard:
                expected = len(self.parameter_names) if self.has_parameters else 0
            else:
                expected = len(expected_names)
            missing = tuple(n for n in expected_names if n not in supplied)
            logger.error(
                "Path has wildcards or different parameters: %d/%d (%s)",
                expected,
                len(pairs),
                self.pattern,
            )
            raise PathBuildError(self.pattern, expected, len(pairs), missing)

        return fill_placeholders(self.pattern, PARAMETER_PREFIX, PARAMETER_SUFFIX, pairs)


def _as_pairs(
    parameters: tuple[object, ...], named: dict[str, object]
) -> list[tuple[str, object]]:
    """Normalize ``create()`` arguments into ``(name, value)`` pairs."""
    if len(parameters) == 1 and isinstance(parameters[0], Mapping):
        pairs = [(str(k), v) for k, v in parameters[0].items()]
    else:
        pairs = []
        for item in parameters:
            if not (isinstance(item, tuple) and len(item) == 2):
                msg = f"Expected (name, value) pairs, got {item!r}"
                raise TypeError(msg)
            pairs.append((str(item[0]), item[1]))
    pairs.extend(named.items())
    return pairs
