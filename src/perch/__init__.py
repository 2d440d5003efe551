"""Perch: URL path templates that match, extract, and build.

Patterns combine literal text, ``*`` wildcards, and ``{name}``
placeholders. They are validated and compiled once, then shared freely.

Basic usage::

    from perch import PathPattern

    users = PathPattern("/users/{id}")
    users.matches("/users/42")             # True
    users.extract_parameters("/users/42")  # {"id": "42"}
    users.create(id=7)                     # "/users/7"
"""

__version__ = "0.1.0"
__all__ = [
    "InvalidPatternError",
    "PathBuildError",
    "PathMismatchError",
    "PathPattern",
    "PerchConfig",
    "PerchError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast while providing a clean top-level API.
    """
    if name == "PathPattern":
        from perch.routing.pattern import PathPattern

        return PathPattern

    if name == "PerchConfig":
        from perch.config import PerchConfig

        return PerchConfig

    if name in ("InvalidPatternError", "PathBuildError", "PathMismatchError", "PerchError"):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
