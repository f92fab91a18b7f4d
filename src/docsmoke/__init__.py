"""docsmoke public API."""

from docsmoke.__about__ import DEFAULT_LANGUAGE
from docsmoke.config import Settings, load_settings
from docsmoke.core import (
    DocsmokeError,
    ErrorKind,
    ErrorPayload,
    ExecutionResult,
    RunTally,
    instrument_docsmoke,
)
from docsmoke.execution import ExecutionRequest, ExecutionResponse, Executor, RizaExecutor
from docsmoke.providers import ProviderKey
from docsmoke.runner import SnippetRunner
from docsmoke.snippets import parse_content, parse_file, substitute_placeholder

__all__ = [
    "DEFAULT_LANGUAGE",
    "DocsmokeError",
    "ErrorKind",
    "ErrorPayload",
    "ExecutionRequest",
    "ExecutionResponse",
    "ExecutionResult",
    "Executor",
    "ProviderKey",
    "RizaExecutor",
    "RunTally",
    "Settings",
    "SnippetRunner",
    "instrument_docsmoke",
    "load_settings",
    "parse_content",
    "parse_file",
    "substitute_placeholder",
]
