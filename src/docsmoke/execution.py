"""Remote execution collaborator for docsmoke."""

from __future__ import annotations

import logging
import re
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field
from rizaio import (
    APIConnectionError,
    APIStatusError,
    APITimeoutError,
    AsyncRiza,
    AuthenticationError,
    BadRequestError,
    PermissionDeniedError,
    RateLimitError,
    RizaError,
    UnprocessableEntityError,
)

from docsmoke.core.errors import DocsmokeError, ErrorKind
from docsmoke.core.results import ErrorPayload

logger = logging.getLogger(__name__)


class HostRule(BaseModel):
    host: str


class HttpPolicy(BaseModel):
    allow: list[HostRule] = Field(default_factory=lambda: [HostRule(host="*")])


class ExecutionRequest(BaseModel):
    """Everything the sandbox needs to run one snippet."""

    model_config = ConfigDict(frozen=True)

    language: str
    code: str
    runtime_revision_id: str
    env: dict[str, str] = Field(default_factory=dict)
    http: HttpPolicy = Field(default_factory=HttpPolicy)


class ExecutionResponse(BaseModel):
    stdout: str | None = None
    stderr: str | None = None
    exit_code: int | None = None


class Executor(Protocol):
    """Submit one request and wait for its output."""

    async def execute(self, request: ExecutionRequest) -> ExecutionResponse: ...


class RizaExecutor:
    """Executor backed by Riza's command exec endpoint.

    Retries are disabled on the SDK client: one attempt per snippet.
    """

    def __init__(self, client: AsyncRiza | None = None, *, client_args: dict[str, Any] | None = None) -> None:
        self._client = client or self._create_client({"max_retries": 0, **(client_args or {})})

    @staticmethod
    def _create_client(client_args: dict[str, Any]) -> AsyncRiza:
        try:
            return AsyncRiza(**client_args)
        except RizaError as exc:
            raise DocsmokeError(ErrorKind.CONFIG, f"Could not create Riza client: {exc}", cause=exc) from exc

    async def execute(self, request: ExecutionRequest) -> ExecutionResponse:
        logger.debug("submitting %s snippet (%d chars)", request.language, len(request.code))
        response = await self._client.command.exec(**request.model_dump())
        logger.debug("snippet exited with code %s", response.exit_code)
        return ExecutionResponse(
            stdout=response.stdout,
            stderr=response.stderr,
            exit_code=response.exit_code,
        )


def _extract_status_code(exc: Exception) -> int | None:
    status_code = getattr(exc, "status_code", None)
    if isinstance(status_code, int):
        return status_code

    response = getattr(exc, "response", None)
    response_status = getattr(response, "status_code", None)
    if isinstance(response_status, int):
        return response_status
    return None


def _text_matches(text: str, patterns: tuple[str, ...]) -> bool:
    return any(re.search(pattern, text) for pattern in patterns)


def _classify_riza_exception(exc: Exception) -> ErrorKind | None:
    error_map = [
        ((AuthenticationError, PermissionDeniedError), ErrorKind.CONFIG),
        ((BadRequestError, UnprocessableEntityError), ErrorKind.INVALID_INPUT),
        ((RateLimitError,), ErrorKind.TEMPORARY),
        ((APITimeoutError, APIConnectionError), ErrorKind.PROVIDER),
    ]
    for types, kind in error_map:
        if isinstance(exc, types):
            return kind
    return None


def _classify_by_http_status(exc: Exception) -> ErrorKind | None:
    status = _extract_status_code(exc)
    if status in {401, 403}:
        return ErrorKind.CONFIG
    if status in {400, 404, 413, 422}:
        return ErrorKind.INVALID_INPUT
    if status in {408, 409, 425, 429}:
        return ErrorKind.TEMPORARY
    if status is not None and 500 <= status < 600:
        return ErrorKind.PROVIDER
    if isinstance(exc, APIStatusError):
        return ErrorKind.PROVIDER
    return None


def _classify_by_text_signature(exc: Exception) -> ErrorKind | None:
    name = type(exc).__name__.lower()
    text = f"{name} {exc!s}".lower()

    if _text_matches(text, (r"auth|unauthorized|forbidden|permission denied", r"invalid[_\s-]?api[_\s-]?key")):
        return ErrorKind.CONFIG
    if _text_matches(text, (r"rate[_\s-]?limit|too many requests", r"\b429\b")):
        return ErrorKind.TEMPORARY
    if _text_matches(text, (r"timeout|timed out|connection error|network error", r"service unavailable")):
        return ErrorKind.PROVIDER
    return None


def classify_exception(exc: Exception) -> ErrorKind:
    if isinstance(exc, DocsmokeError):
        return exc.kind
    for classifier in (
        _classify_riza_exception,
        _classify_by_http_status,
        _classify_by_text_signature,
    ):
        mapped = classifier(exc)
        if mapped is not None:
            return mapped
    return ErrorKind.UNKNOWN


def error_payload(exc: Exception) -> ErrorPayload:
    kind = classify_exception(exc)
    details: dict[str, Any] = {"type": type(exc).__name__}
    status = _extract_status_code(exc)
    if status is not None:
        details["status_code"] = status
    message = exc.message if isinstance(exc, DocsmokeError) else str(exc)
    return ErrorPayload(kind, message or type(exc).__name__, details=details)
