"""Core primitives for docsmoke."""

from docsmoke.core.errors import DocsmokeError, ErrorKind
from docsmoke.core.results import ErrorPayload, ExecutionResult, RunTally
from docsmoke.core.telemetry import instrument_docsmoke, span

__all__ = [
    "DocsmokeError",
    "ErrorKind",
    "ErrorPayload",
    "ExecutionResult",
    "RunTally",
    "instrument_docsmoke",
    "span",
]
