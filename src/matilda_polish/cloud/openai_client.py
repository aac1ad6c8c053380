"""OpenAI Chat Completions client."""

from __future__ import annotations

from typing import Any

from .base import USER_PROMPT_TEMPLATE, HTTPRewriteClient

OPENAI_ENDPOINT = "https://api.openai.com/v1/chat/completions"
OPENAI_DEFAULT_MODEL = "gpt-4"
TEMPERATURE = 0.3


class OpenAIClient(HTTPRewriteClient):
    name = "openai"

    def __init__(
        self,
        api_key: str,
        model: str = OPENAI_DEFAULT_MODEL,
        endpoint: str = OPENAI_ENDPOINT,
        **kwargs: Any,
    ):
        super().__init__(api_key, model, endpoint, **kwargs)

    def build_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.api_key}", "Content-Type": "application/json"}

    def build_payload(self, text: str, system_prompt: str) -> dict[str, Any]:
        return {
            "model": self.model,
            "temperature": TEMPERATURE,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": USER_PROMPT_TEMPLATE.format(text=text)},
            ],
        }

    def extract_text(self, body: dict[str, Any]) -> str:
        return body["choices"][0]["message"]["content"]


__all__ = ["OpenAIClient", "OPENAI_ENDPOINT", "OPENAI_DEFAULT_MODEL"]
