"""Perch exception hierarchy.

Shared across PathPattern, the CLI, and the testing helpers so every
module raises and catches the same types. Every error here is a caller
bug surfaced immediately; nothing in perch retries or recovers.
"""


class PerchError(Exception):
    """Base for all perch-specific errors."""


class InvalidPatternError(PerchError, ValueError):
    """Raised at construction when a path pattern is malformed.

    ``rule`` names the violated constraint: ``"prefix"`` (must start with
    ``/`` or ``*``), ``"colon"`` (``:`` is not allowed), or ``"regex"``
    (the compiled expression is not a valid regular expression).
    """

    def __init__(self, pattern: str, rule: str, detail: str) -> None:
        super().__init__(detail)
        self.pattern = pattern
        self.rule = rule
        self.detail = detail


class PathMismatchError(PerchError, ValueError):
    """Parameters were requested from a path the pattern does not match.

    Callers must check ``PathPattern.matches()`` first.
    """

    def __init__(self, pattern: str, path: str) -> None:
        super().__init__(f"URL {path!r} does not match path {pattern!r}")
        self.pattern = pattern
        self.path = path


class PathBuildError(PerchError, ValueError):
    """A concrete path cannot be built from the pattern.

    Either the pattern has wildcards, or the supplied parameters differ
    from the placeholder names. ``missing`` lists placeholder names that
    were not supplied.
    """

    def __init__(
        self,
        pattern: str,
        expected: int,
        actual: int,
        missing: tuple[str, ...] = (),
    ) -> None:
        msg = f"Path has wildcards or different parameters: {expected}/{actual}"
        if missing:
            msg = f"{msg} (missing: {', '.join(missing)})"
        super().__init__(msg)
        self.pattern = pattern
        self.expected = expected
        self.actual = actual
        self.missing = missing
