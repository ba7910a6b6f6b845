"""
LLM Provider
============
Connection settings for the upstream chat-completion API.

The credential travels inside ProviderConfig and is handed to the client
explicitly, so tests can substitute a provider without touching the
process environment.
"""
from dataclasses import dataclass
from buglens.core.config import (
    OPENROUTER_API_KEY, OPENROUTER_BASE_URL, UPSTREAM_TIMEOUT_SECONDS,
)


@dataclass(frozen=True)
class ProviderConfig:
    """Configuration for an OpenAI-compatible chat-completion provider."""
    name: str
    api_key: str
    base_url: str
    label: str = ""
    api_key_env: str = ""
    timeout_seconds: float = 60.0

    @property
    def completions_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/chat/completions"

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)


OPENROUTER_CONFIG = ProviderConfig(
    name="openrouter",
    label="OpenRouter",
    api_key=OPENROUTER_API_KEY or "",
    base_url=OPENROUTER_BASE_URL,
    api_key_env="OPENROUTER_API_KEY",
    timeout_seconds=UPSTREAM_TIMEOUT_SECONDS,
)
