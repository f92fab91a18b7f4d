from __future__ import annotations

from contextlib import nullcontext

import pytest

from docsmoke.core import DocsmokeError, ErrorKind, instrument_docsmoke, span


class TestTelemetry:
    def test_span_noop_when_logfire_missing(self, monkeypatch):
        monkeypatch.setattr("docsmoke.core.telemetry.logfire", None)
        instrumented = span("docsmoke.test")
        assert instrumented is not None
        with instrumented:
            pass

    def test_span_noop_until_instrumented(self, monkeypatch):
        monkeypatch.setattr("docsmoke.core.telemetry._INSTRUMENTED", False)
        with span("docsmoke.test", index=0):
            pass

    def test_instrument_docsmoke_requires_logfire(self, monkeypatch):
        monkeypatch.setattr("docsmoke.core.telemetry.logfire", None)

        with pytest.raises(DocsmokeError) as exc_info:
            instrument_docsmoke()
        assert exc_info.value.kind == ErrorKind.CONFIG
        assert str(exc_info.value).startswith("[config] ")

    def test_span_delegates_to_logfire_once_instrumented(self, monkeypatch):
        opened = []

        class _Logfire:
            def span(self, name, **attributes):
                opened.append((name, attributes))
                return nullcontext()

        monkeypatch.setattr("docsmoke.core.telemetry.logfire", _Logfire())
        monkeypatch.setattr("docsmoke.core.telemetry._INSTRUMENTED", True)

        with span("docsmoke.snippet", index=0, language="python"):
            pass
        assert opened == [("docsmoke.snippet", {"index": 0, "language": "python"})]
