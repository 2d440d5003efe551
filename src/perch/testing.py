"""Path pattern assertion helpers for perch tests.

Convenience functions to verify how a pattern treats concrete paths.
Each assertion accepts a ``PathPattern`` or a pattern string and
produces a clear error message on failure.
"""

from collections.abc import Mapping

from perch.routing.pattern import PathPattern


def _coerce(pattern: PathPattern | str) -> PathPattern:
    return pattern if isinstance(pattern, PathPattern) else PathPattern(pattern)


def assert_matches(pattern: PathPattern | str, path: str) -> None:
    """Assert *path* matches *pattern*."""
    compiled = _coerce(pattern)
    assert compiled.matches(path), (
        f"Expected {path!r} to match {compiled.pattern!r}.\n"
        f"Expression: {_expression(compiled)}"
    )


def assert_not_matches(pattern: PathPattern | str, path: str) -> None:
    """Assert *path* does **not** match *pattern*."""
    compiled = _coerce(pattern)
    assert not compiled.matches(path), (
        f"Expected {path!r} not to match {compiled.pattern!r}.\n"
        f"Expression: {_expression(compiled)}"
    )


def assert_extracts(
    pattern: PathPattern | str,
    path: str,
    expected: Mapping[str, str],
) -> None:
    """Assert *path* matches and yields exactly the *expected* parameters."""
    compiled = _coerce(pattern)
    assert_matches(compiled, path)
    actual = compiled.extract_parameters(path)
    assert actual == dict(expected), (
        f"Parameters from {path!r} with {compiled.pattern!r} differ.\n"
        f"Expected: {dict(expected)!r}\n"
        f"Actual:   {actual!r}"
    )


def assert_builds(
    pattern: PathPattern | str,
    parameters: Mapping[str, object],
    expected: str,
) -> None:
    """Assert building *pattern* from *parameters* gives *expected*.

    Also checks that the built path matches the pattern again.
    """
    compiled = _coerce(pattern)
    actual = compiled.create(parameters)
    assert actual == expected, (
        f"Building {compiled.pattern!r} from {dict(parameters)!r} gave {actual!r}, "
        f"expected {expected!r}"
    )
    assert compiled.matches(actual), (
        f"Built path {actual!r} does not match its own pattern {compiled.pattern!r}"
    )


def _expression(pattern: PathPattern) -> str:
    if pattern.match_expression is None:
        return "<exact match>"
    return pattern.match_expression.pattern
