from __future__ import annotations

import pytest

from docsmoke import ProviderKey
from docsmoke.reporting import ConsoleReporter

from .fakes import FakeExecutor, RecordingSleep


@pytest.fixture
def fake_executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def recording_sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def provider_key() -> ProviderKey:
    return ProviderKey(provider="cohere", env_name="COHERE_API_KEY", value="sk-1")


@pytest.fixture
def reporter() -> ConsoleReporter:
    return ConsoleReporter()


@pytest.fixture
def docsmoke_env(monkeypatch):
    for name in (
        "ELEVENLABS_API_KEY",
        "COHERE_API_KEY",
        "RIZA_RUNTIME_REVISION_ID_TYPESCRIPT",
        "RIZA_RUNTIME_REVISION_ID_PYTHON",
        "DOCSMOKE_DELAY",
        "DOCSMOKE_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("COHERE_API_KEY", "sk-cohere")
    monkeypatch.setenv("RIZA_RUNTIME_REVISION_ID_PYTHON", "rev-py")
    monkeypatch.setenv("RIZA_RUNTIME_REVISION_ID_TYPESCRIPT", "rev-ts")
    return monkeypatch
