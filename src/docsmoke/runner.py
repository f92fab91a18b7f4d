"""Sequential snippet runner."""

from __future__ import annotations

import asyncio
import logging
import math
from collections.abc import Awaitable, Callable, Iterable

from docsmoke.config import DEFAULT_DELAY, Settings
from docsmoke.core.errors import DocsmokeError, ErrorKind
from docsmoke.core.results import ExecutionResult, RunTally
from docsmoke.core.telemetry import span
from docsmoke.execution import ExecutionRequest, Executor, error_payload
from docsmoke.providers import ProviderKey, fence_tag
from docsmoke.reporting import ConsoleReporter, Reporter
from docsmoke.snippets.placeholders import substitute_placeholder

logger = logging.getLogger(__name__)

SkipHook = Callable[[str], bool]
Sleep = Callable[[float], Awaitable[object]]


class SnippetRunner:
    """Run snippets one at a time against an executor and tally the outcomes.

    Exactly one executor call is in flight at any time. Failures are counted
    per snippet and never stop the run.
    """

    def __init__(
        self,
        executor: Executor,
        provider_key: ProviderKey,
        *,
        language: str,
        runtime_revision_id: str,
        reporter: Reporter | None = None,
        delay: float = DEFAULT_DELAY,
        should_skip: SkipHook | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        fence_tag(language)
        if not math.isfinite(delay) or delay < 0:
            raise DocsmokeError(ErrorKind.INVALID_INPUT, f"delay must be a finite number >= 0, got {delay!r}.")
        self._executor = executor
        self._provider_key = provider_key
        self._language = language
        self._runtime_revision_id = runtime_revision_id
        self._reporter = reporter or ConsoleReporter()
        self._delay = delay
        self._should_skip = should_skip
        self._sleep = sleep or asyncio.sleep

    @classmethod
    def from_settings(cls, settings: Settings, executor: Executor, **kwargs) -> SnippetRunner:
        return cls(
            executor,
            settings.provider_key,
            language=settings.language,
            runtime_revision_id=settings.runtime_revision_id,
            delay=settings.delay,
            **kwargs,
        )

    def build_request(self, code: str) -> ExecutionRequest:
        return ExecutionRequest(
            language=self._language,
            code=code,
            runtime_revision_id=self._runtime_revision_id,
            env=self._provider_key.as_env(),
        )

    async def execute(self, snippet: str) -> ExecutionResult:
        code = substitute_placeholder(snippet, self._provider_key.value)
        self._reporter.snippet(code)
        try:
            response = await self._executor.execute(self.build_request(code))
        except Exception as exc:
            error = error_payload(exc)
            logger.warning("snippet execution failed: %s", error.as_dict())
            return ExecutionResult.from_error(code, error)
        return ExecutionResult.from_output(code, response.stdout, response.stderr)

    async def run(self, snippets: Iterable[str]) -> RunTally:
        tally = RunTally()
        for index, snippet in enumerate(snippets):
            with span("docsmoke.snippet", index=index, language=self._language):
                if self._should_skip is not None and self._should_skip(snippet):
                    self._reporter.skipped(snippet)
                    tally = tally.skip()
                else:
                    result = await self.execute(snippet)
                    self._reporter.result(result)
                    tally = tally.record(result)
                self._reporter.tally(tally)
            if self._delay:
                await self._sleep(self._delay)
        return tally
