"""Hook implementations for Matilda Polish - transcript enhancement.

This file contains the business logic for the CLI commands. The click
layer in main.py only parses arguments and renders what these return.

IMPORTANT: Hook names must use snake_case with 'on_' prefix
Example:
- Command 'enhance' -> Hook function 'on_enhance'
- Command 'parse-command' -> Hook function 'on_parse_command'
"""

import asyncio
from typing import Any, Dict, Optional

from .cloud.registry import get_provider_info
from .context import PolishContext
from .core.config import ConfigLoader
from .enhancement.voice_commands import VoiceCommandParser
from .schemas import ClassificationResponse, EnhancementResponse, VoiceCommandResponse
from .types import DocumentType


def _build_context(config: Optional[str]) -> PolishContext:
    return PolishContext.from_config(ConfigLoader(config) if config else ConfigLoader())


def on_enhance(
    text: str,
    type: Optional[str] = None,
    no_learning: bool = False,
    cloud: bool = False,
    config: Optional[str] = None,
    **kwargs,
) -> Dict[str, Any]:
    """Handle enhance command.
        text: Transcript to polish
        type: Document type, or None to auto-detect
        no_learning: Skip learned patterns
        cloud: Request a cloud rewrite
    Returns:
        Serialized EnhancementResponse
    """
    document_type = DocumentType.parse(type) if type else DocumentType.UNKNOWN
    context = _build_context(config)
    try:
        enhanced = asyncio.run(
            context.pipeline.enhance(
                text, document_type=document_type, apply_learning=not no_learning, use_cloud=cloud
            )
        )
    finally:
        context.close()
    return EnhancementResponse.from_enhanced(enhanced).model_dump()


def on_classify(text: str, config: Optional[str] = None, **kwargs) -> Dict[str, Any]:
    """Handle classify command.
    Raises:
        EmptyTextError, ModelNotLoadedError
    """
    context = _build_context(config)
    try:
        result = context.classifier.classify(text)
    finally:
        context.close()
    return ClassificationResponse.from_result(result).model_dump()


def on_parse_command(text: str, config: Optional[str] = None, **kwargs) -> Dict[str, Any]:
    """Handle parse-command command."""
    loader = ConfigLoader(config) if config else ConfigLoader()
    parser = VoiceCommandParser(prefixes=loader.voice_command_prefixes)
    return VoiceCommandResponse.from_instruction(parser.parse(text)).model_dump()


def on_providers(config: Optional[str] = None, **kwargs) -> Dict[str, Any]:
    """Handle providers command."""
    loader = ConfigLoader(config) if config else ConfigLoader()
    return {
        "status": "success",
        "configured": loader.cloud_provider,
        "enabled": bool(loader.get("cloud.enabled", False)),
        "api_key_configured": bool(loader.cloud_api_key),
        "providers": get_provider_info(),
    }
