"""Provider and language tables shared across the run."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from docsmoke.core.errors import DocsmokeError, ErrorKind


@dataclass(frozen=True)
class ProviderKey:
    provider: str
    env_name: str
    value: str

    def as_env(self) -> dict[str, str]:
        return {self.env_name: self.value}


_PROVIDER_ENV_NAMES: dict[str, str] = {
    "elevenlabs": "ELEVENLABS_API_KEY",
    "cohere": "COHERE_API_KEY",
}

# Fence tag used for each supported language.
_FENCE_TAGS: dict[str, str] = {
    "python": "python",
    "typescript": "typescript",
}

_RUNTIME_REVISION_ENV_NAMES: dict[str, str] = {
    "typescript": "RIZA_RUNTIME_REVISION_ID_TYPESCRIPT",
    "python": "RIZA_RUNTIME_REVISION_ID_PYTHON",
}


def supported_providers() -> list[str]:
    return sorted(_PROVIDER_ENV_NAMES)


def supported_languages() -> list[str]:
    return sorted(_FENCE_TAGS)


def fence_tag(language: str) -> str:
    try:
        return _FENCE_TAGS[language]
    except KeyError:
        raise DocsmokeError(
            ErrorKind.INVALID_INPUT,
            f"Unsupported language '{language}'. Expected one of: {', '.join(supported_languages())}.",
        ) from None


def provider_env_name(provider: str) -> str:
    try:
        return _PROVIDER_ENV_NAMES[provider]
    except KeyError:
        raise DocsmokeError(
            ErrorKind.INVALID_INPUT,
            f"Unknown provider '{provider}'. Expected one of: {', '.join(supported_providers())}.",
        ) from None


def runtime_revision_env_name(language: str) -> str:
    fence_tag(language)
    return _RUNTIME_REVISION_ENV_NAMES[language]


def resolve_provider_key(provider: str, environ: Mapping[str, str]) -> ProviderKey:
    env_name = provider_env_name(provider)
    value = environ.get(env_name)
    if not value:
        raise DocsmokeError(ErrorKind.CONFIG, f"API key not found for {provider} ({env_name} is not set).")
    return ProviderKey(provider=provider, env_name=env_name, value=value)
