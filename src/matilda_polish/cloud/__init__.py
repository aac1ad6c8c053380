"""
Cloud rewrite providers.

Supported providers:
- claude: Anthropic Messages API
- openai: OpenAI Chat Completions API
"""

from .base import CloudRewriteProvider, HTTPRewriteClient
from .claude import ClaudeClient
from .openai_client import OpenAIClient
from .prompts import get_system_prompt
from .registry import create_provider, get_available_providers, get_provider_info

__all__ = [
    "CloudRewriteProvider",
    "HTTPRewriteClient",
    "ClaudeClient",
    "OpenAIClient",
    "get_system_prompt",
    "create_provider",
    "get_available_providers",
    "get_provider_info",
]
