"""Cloud rewrite provider interface and shared HTTP plumbing."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

import aiohttp

from ..core.logging import setup_logging
from ..errors import CloudAPIError, CloudResponseError, CloudRewriteFailure, CloudTimeoutError
from ..types import DocumentType
from .prompts import get_system_prompt

logger = setup_logging(__name__)

DEFAULT_TIMEOUT_S = 30.0
USER_PROMPT_TEMPLATE = "Please enhance the following transcribed text:\n\n{text}"


@runtime_checkable
class CloudRewriteProvider(Protocol):
    name: str

    async def enhance(self, text: str, document_type: DocumentType, system_prompt: str | None = None) -> str:
        ...


class HTTPRewriteClient:
    """JSON-over-HTTPS client shared by the concrete providers.

    Subclasses build the request and pick the rewritten text out of the
    response body.
    """

    name = "http"

    def __init__(
        self,
        api_key: str,
        model: str,
        endpoint: str,
        timeout_s: float = DEFAULT_TIMEOUT_S,
        session_factory: Callable[..., Any] | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.endpoint = endpoint
        self.timeout_s = timeout_s
        self._session_factory = session_factory or aiohttp.ClientSession

    def build_headers(self) -> dict[str, str]:
        raise NotImplementedError

    def build_payload(self, text: str, system_prompt: str) -> dict[str, Any]:
        raise NotImplementedError

    def extract_text(self, body: dict[str, Any]) -> str:
        raise NotImplementedError

    async def enhance(self, text: str, document_type: DocumentType, system_prompt: str | None = None) -> str:
        prompt = system_prompt or get_system_prompt(document_type)
        body = await self._post(self.build_payload(text, prompt))
        try:
            enhanced = self.extract_text(body)
        except (KeyError, IndexError, TypeError) as e:
            raise CloudResponseError(f"Unexpected response shape: {e}", provider=self.name) from e
        if not isinstance(enhanced, str) or not enhanced.strip():
            raise CloudResponseError("Provider returned no text", provider=self.name)
        return enhanced.strip()

    async def _post(self, payload: dict[str, Any]) -> dict[str, Any]:
        timeout = aiohttp.ClientTimeout(total=self.timeout_s)
        logger.debug(f"Requesting {self.name} rewrite from {self.endpoint}")
        try:
            async with self._session_factory(timeout=timeout) as session:
                async with session.post(self.endpoint, json=payload, headers=self.build_headers()) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        raise CloudAPIError(response.status, error_text[:200], provider=self.name)
                    return await response.json()
        except CloudRewriteFailure:
            raise
        except asyncio.TimeoutError as e:
            raise CloudTimeoutError(f"{self.name} request timed out after {self.timeout_s}s", provider=self.name) from e
        except aiohttp.ContentTypeError as e:
            raise CloudResponseError(f"Non-JSON response: {e}", provider=self.name) from e
        except ValueError as e:
            raise CloudResponseError(f"Malformed JSON body: {e}", provider=self.name) from e
        except aiohttp.ClientError as e:
            raise CloudRewriteFailure(f"{self.name} request failed: {e}", provider=self.name) from e


__all__ = ["CloudRewriteProvider", "HTTPRewriteClient", "DEFAULT_TIMEOUT_S", "USER_PROMPT_TEMPLATE"]
