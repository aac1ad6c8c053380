"""Prefix-triggered voice command parsing.

An utterance such as "BV, write an email to Sam. Thanks for everything"
names its own target format, so it bypasses automatic classification.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..core.logging import setup_logging
from ..types import VoiceCommandInstruction
from .patterns import (
    DEFAULT_COMMAND_PREFIXES,
    INSTRUCTION_PATTERNS,
    RECIPIENT_TERMINATOR_PATTERN,
    InstructionPattern,
)

logger = setup_logging(__name__)

LEADING_SEPARATORS = ", "


class VoiceCommandParser:
    def __init__(
        self,
        prefixes: Sequence[str] = DEFAULT_COMMAND_PREFIXES,
        patterns: Sequence[InstructionPattern] = INSTRUCTION_PATTERNS,
    ):
        self.prefixes = tuple(prefixes)
        self.patterns = tuple(patterns)

    def parse(self, text: str) -> VoiceCommandInstruction | None:
        trimmed = text.strip()
        matched = self._match_prefix(trimmed)
        if matched is None:
            return None
        prefix, remainder = matched

        lowered = remainder.lower()
        for pattern in self.patterns:
            if not lowered.startswith(pattern.phrase.lower()):
                continue

            after_pattern = remainder[len(pattern.phrase):].lstrip(LEADING_SEPARATORS)
            recipient = None
            content = after_pattern
            if pattern.extracts_recipient:
                recipient, content = self._extract_recipient(after_pattern)

            instruction = VoiceCommandInstruction(
                prefix=prefix,
                instruction=pattern.phrase,
                content=content,
                target_document_type=pattern.document_type,
                recipient=recipient,
                metadata=dict(pattern.metadata),
            )
            logger.info(
                f"Voice command detected: '{pattern.phrase}' -> {pattern.document_type.value}"
                + (f" (recipient: {recipient})" if recipient else "")
            )
            return instruction

        logger.debug(f"Prefix '{prefix}' matched but no instruction pattern did")
        return None

    def _match_prefix(self, text: str) -> tuple[str, str] | None:
        lowered = text.lower()
        for prefix in self.prefixes:
            if not lowered.startswith(prefix.lower()):
                continue
            remainder = text[len(prefix):].lstrip(LEADING_SEPARATORS)
            if remainder:
                return prefix, remainder
        return None

    def _extract_recipient(self, text: str) -> tuple[str | None, str]:
        match = RECIPIENT_TERMINATOR_PATTERN.search(text)
        if match is None:
            return None, text

        recipient = text[: match.start()].strip()
        content = text[match.end():].strip()
        if not recipient or not content:
            return None, text
        return recipient, content


__all__ = ["VoiceCommandParser"]
