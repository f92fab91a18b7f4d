"""Error definitions for docsmoke."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Stable error kinds for caller decisions."""

    INVALID_INPUT = "invalid_input"
    CONFIG = "config"
    PROVIDER = "provider"
    EXECUTION = "execution"
    TEMPORARY = "temporary"
    UNKNOWN = "unknown"


@dataclass
class DocsmokeError(Exception):
    """Public error type for docsmoke.

    Attributes:
        kind: Stable, actionable error kind.
        message: Human-readable description.
        cause: Original exception for debugging.
    """

    kind: ErrorKind
    message: str
    cause: Exception | None = None

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"
