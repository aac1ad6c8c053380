"""Cloud provider lookup by configuration name."""

from __future__ import annotations

from typing import Any

from ..core.logging import setup_logging
from ..errors import UnsupportedProviderError
from .base import DEFAULT_TIMEOUT_S, CloudRewriteProvider, HTTPRewriteClient
from .claude import ClaudeClient
from .openai_client import OpenAIClient

logger = setup_logging(__name__)

PROVIDERS: dict[str, type[HTTPRewriteClient]] = {
    "claude": ClaudeClient,
    "openai": OpenAIClient,
}


def get_available_providers() -> list[str]:
    """Return the provider names accepted by create_provider."""
    return list(PROVIDERS)


def get_provider_info() -> dict[str, dict[str, str]]:
    return {
        "claude": {
            "description": "Anthropic Messages API",
            "endpoint": ClaudeClient(api_key="").endpoint,
            "api_key_env": "ANTHROPIC_API_KEY",
        },
        "openai": {
            "description": "OpenAI Chat Completions API",
            "endpoint": OpenAIClient(api_key="").endpoint,
            "api_key_env": "OPENAI_API_KEY",
        },
    }


def create_provider(
    name: str,
    api_key: str,
    timeout_s: float = DEFAULT_TIMEOUT_S,
    **options: Any,
) -> CloudRewriteProvider:
    """Build the provider configured under ``name``.

    Args:
        name: 'claude' or 'openai' (case-insensitive)
        api_key: Credential sent with every request
        timeout_s: Total request timeout in seconds
        **options: Provider options such as ``model`` or ``endpoint``

    Raises:
        UnsupportedProviderError: If the name matches no known client.

    """
    provider_cls = PROVIDERS.get(name.strip().lower())
    if provider_cls is None:
        logger.error(f"Unknown cloud provider '{name}'. Available: {', '.join(PROVIDERS)}")
        raise UnsupportedProviderError(name)

    known = {k: v for k, v in options.items() if k in ("model", "endpoint", "session_factory") and v}
    return provider_cls(api_key=api_key, timeout_s=timeout_s, **known)


__all__ = ["PROVIDERS", "create_provider", "get_available_providers", "get_provider_info"]
