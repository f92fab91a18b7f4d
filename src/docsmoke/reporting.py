"""Console reporting for snippet runs."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

from docsmoke.core.results import ErrorPayload, ExecutionResult, RunTally


class Reporter(Protocol):
    def snippet(self, code: str) -> None: ...

    def result(self, result: ExecutionResult) -> None: ...

    def skipped(self, code: str) -> None: ...

    def tally(self, tally: RunTally) -> None: ...


class ConsoleReporter:
    """Echo snippets and their remote output to the terminal."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self._out = out
        self._err = err

    @property
    def out(self) -> TextIO:
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def snippet(self, code: str) -> None:
        print(code, file=self.out)

    def result(self, result: ExecutionResult) -> None:
        if result.stdout is None and result.stderr is None and result.error is not None:
            self._error(result.error)
            return
        print(result.stdout or "", file=self.out)
        print(result.stderr or "", file=self.err)

    def _error(self, error: ErrorPayload) -> None:
        print("Error executing snippet", file=self.err)
        print(f"[{error.kind.value}] {error.message}", file=self.err)

    def skipped(self, code: str) -> None:
        print("Snippet skipped", file=self.err)

    def tally(self, tally: RunTally) -> None:
        for line in tally.summary_lines():
            print(line, file=self.out)
