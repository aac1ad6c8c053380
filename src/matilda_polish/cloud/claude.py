"""Anthropic Messages API client."""

from __future__ import annotations

from typing import Any

from .base import USER_PROMPT_TEMPLATE, HTTPRewriteClient

CLAUDE_ENDPOINT = "https://api.anthropic.com/v1/messages"
CLAUDE_DEFAULT_MODEL = "claude-3-5-sonnet-20241022"
ANTHROPIC_VERSION = "2023-06-01"
MAX_TOKENS = 1024


class ClaudeClient(HTTPRewriteClient):
    name = "claude"

    def __init__(
        self,
        api_key: str,
        model: str = CLAUDE_DEFAULT_MODEL,
        endpoint: str = CLAUDE_ENDPOINT,
        **kwargs: Any,
    ):
        super().__init__(api_key, model, endpoint, **kwargs)

    def build_headers(self) -> dict[str, str]:
        return {
            "x-api-key": self.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
            "content-type": "application/json",
        }

    def build_payload(self, text: str, system_prompt: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "max_tokens": MAX_TOKENS,
            "system": system_prompt,
            "messages": [{"role": "user", "content": USER_PROMPT_TEMPLATE.format(text=text)}],
        }

    def extract_text(self, body: dict[str, Any]) -> str:
        return body["content"][0]["text"]


__all__ = ["ClaudeClient", "CLAUDE_ENDPOINT", "CLAUDE_DEFAULT_MODEL"]
