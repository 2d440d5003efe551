"""Perch configuration.

PerchConfig is a frozen dataclass: immutable after creation, no
string-key dict lookups. Only the CLI reads it; the library itself
never configures logging.
"""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_TRUTHY = frozenset({"1", "true", "yes", "on"})
DEFAULT_LOG_LEVEL = "warning"
LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


@dataclass(frozen=True, slots=True)
class PerchConfig:
    """CLI and logging configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = PerchConfig(log_level="debug", json_output=True)
    """

    # Logging
    log_level: str = DEFAULT_LOG_LEVEL
    log_format: str = "%(levelname)s %(name)s: %(message)s"

    # Output
    json_output: bool = False

    def __post_init__(self) -> None:
        if self.log_level.lower() not in LOG_LEVELS:
            msg = f"Unknown log level {self.log_level!r}; expected one of {', '.join(LOG_LEVELS)}"
            raise ValueError(msg)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        **overrides: Any,
    ) -> "PerchConfig":
        """Build a config from ``PERCH_LOG_LEVEL`` and ``PERCH_JSON``.

        *overrides* replace environment values before validation, so an
        explicit setting wins even when the environment holds a bad one.
        Raises ``ValueError`` if the resulting log level is unknown.
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {
            "log_level": env.get("PERCH_LOG_LEVEL", DEFAULT_LOG_LEVEL),
            "json_output": env.get("PERCH_JSON", "").strip().lower() in _TRUTHY,
        }
        values.update(overrides)
        return cls(**values)

    @property
    def level(self) -> int:
        """Numeric ``logging`` level for ``log_level``."""
        return logging.getLevelNamesMapping()[self.log_level.upper()]

    def configure_logging(self) -> None:
        """Install a root handler and set the ``perch`` logger level.

        ``basicConfig`` is a no-op when the root logger already has
        handlers, so an embedding application keeps its own setup.
        """
        logging.basicConfig(format=self.log_format)
        logging.getLogger("perch").setLevel(self.level)
