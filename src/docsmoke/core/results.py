"""Structured results for docsmoke runs."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from docsmoke.core.errors import ErrorKind


@dataclass(frozen=True)
class ErrorPayload:
    kind: ErrorKind
    message: str
    details: dict[str, Any] | None = None

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "kind": self.kind.value,
            "message": self.message,
        }
        if self.details:
            payload["details"] = self.details
        return payload


@dataclass(frozen=True)
class ExecutionResult:
    """Outcome of one snippet submitted to the executor."""

    code: str
    stdout: str | None = None
    stderr: str | None = None
    error: ErrorPayload | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def from_output(cls, code: str, stdout: str | None, stderr: str | None) -> ExecutionResult:
        # A missing stderr stream is not proof of success.
        if stderr is not None and len(stderr) == 0:
            return cls(code=code, stdout=stdout, stderr=stderr)
        return cls(
            code=code,
            stdout=stdout,
            stderr=stderr,
            error=ErrorPayload(ErrorKind.EXECUTION, "snippet wrote to stderr."),
        )

    @classmethod
    def from_error(cls, code: str, error: ErrorPayload) -> ExecutionResult:
        return cls(code=code, error=error)


@dataclass(frozen=True)
class RunTally:
    """Run-scoped counters, folded one snippet at a time."""

    skipped: int = 0
    succeeded: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.skipped + self.succeeded + self.failed

    def record(self, result: ExecutionResult) -> RunTally:
        if result.ok:
            return replace(self, succeeded=self.succeeded + 1)
        return replace(self, failed=self.failed + 1)

    def skip(self) -> RunTally:
        return replace(self, skipped=self.skipped + 1)

    def summary_lines(self) -> list[str]:
        return [
            f"{self.skipped} snippets skipped",
            f"{self.succeeded} snippets succeeded",
            f"{self.failed} snippets failed",
        ]
