"""Settings resolved once from the process environment."""

from __future__ import annotations

import logging
import math
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from docsmoke.__about__ import DEFAULT_LANGUAGE
from docsmoke.core.errors import DocsmokeError, ErrorKind
from docsmoke.providers import ProviderKey, resolve_provider_key, runtime_revision_env_name

DEFAULT_DELAY = 1.0
DELAY_ENV = "DOCSMOKE_DELAY"
LOG_LEVEL_ENV = "DOCSMOKE_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    provider_key: ProviderKey
    language: str
    runtime_revision_id: str
    document: Path
    delay: float = DEFAULT_DELAY

    @property
    def provider(self) -> str:
        return self.provider_key.provider


def _parse_delay(raw: str | None) -> float:
    if raw is None or raw == "":
        return DEFAULT_DELAY
    try:
        delay = float(raw)
    except ValueError as exc:
        raise DocsmokeError(ErrorKind.CONFIG, f"{DELAY_ENV} must be a number, got {raw!r}.", cause=exc) from exc
    if not math.isfinite(delay) or delay < 0:
        raise DocsmokeError(ErrorKind.CONFIG, f"{DELAY_ENV} must be a finite number >= 0, got {raw!r}.")
    return delay


def resolve_log_level(verbose: bool = False, environ: Mapping[str, str] | None = None) -> int:
    if verbose:
        return logging.DEBUG
    env = os.environ if environ is None else environ
    raw = env.get(LOG_LEVEL_ENV) or "INFO"
    level = logging.getLevelName(raw.strip().upper())
    if not isinstance(level, int):
        raise DocsmokeError(ErrorKind.CONFIG, f"{LOG_LEVEL_ENV} is not a log level, got {raw!r}.")
    return level


def default_document(provider: str) -> Path:
    return Path(f"{provider}.txt")


def load_settings(
    provider: str | None,
    language: str | None = None,
    *,
    document: Path | None = None,
    delay: float | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """Resolve everything a run needs before any snippet is touched.

    The runtime revision is checked before the provider secret so the first
    reported misconfiguration matches the order operators fix them in.
    """
    env = os.environ if environ is None else environ
    if not provider:
        raise DocsmokeError(ErrorKind.INVALID_INPUT, "Please provide a provider name as the first argument.")
    language = language or DEFAULT_LANGUAGE

    revision_env = runtime_revision_env_name(language)
    runtime_revision_id = env.get(revision_env)
    if not runtime_revision_id:
        raise DocsmokeError(ErrorKind.CONFIG, f"Runtime revision ID not found for {language} ({revision_env} is not set).")

    provider_key = resolve_provider_key(provider, env)

    if delay is None:
        delay = _parse_delay(env.get(DELAY_ENV))
    elif not math.isfinite(delay) or delay < 0:
        raise DocsmokeError(ErrorKind.INVALID_INPUT, f"delay must be a finite number >= 0, got {delay!r}.")

    return Settings(
        provider_key=provider_key,
        language=language,
        runtime_revision_id=runtime_revision_id,
        document=document or default_document(provider),
        delay=delay,
    )
