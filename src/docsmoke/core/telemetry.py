"""Observability helpers for docsmoke."""

from __future__ import annotations

from contextlib import nullcontext
from typing import Any

try:  # pragma: no cover - optional dependency
    import logfire  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    logfire = None

from docsmoke.core.errors import DocsmokeError, ErrorKind

_INSTRUMENTED = False


def span(name: str, **attributes: Any):
    """Open a Logfire span, or a no-op context until `instrument_docsmoke()` ran.

    The runner wraps each snippet in `docsmoke.snippet` with its index and language.
    """
    if not _INSTRUMENTED or logfire is None:
        return nullcontext()
    return logfire.span(name, **attributes)


def instrument_docsmoke() -> None:
    """Enable docsmoke's Logfire spans after users configure Logfire themselves."""
    if logfire is None:
        raise DocsmokeError(
            ErrorKind.CONFIG,
            "Logfire is not installed. Install with 'docsmoke[observability]' to enable tracing.",
        )
    global _INSTRUMENTED
    _INSTRUMENTED = True
