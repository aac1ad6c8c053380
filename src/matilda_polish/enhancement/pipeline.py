#!/usr/bin/env python3
"""Staged transcript enhancement with per-stage fallback.

Stage order is fixed:
  voice command -> classify -> normalize -> self-correction -> fillers ->
  punctuate/capitalize -> format -> learned patterns -> cloud rewrite

No stage aborts the pipeline: a failing optional stage passes its input
through and the failure is logged.
"""

from __future__ import annotations

import asyncio
import difflib
import re
import unicodedata
from collections.abc import Callable
from typing import Any

from ..classification.service import TextClassificationService
from ..cloud.base import CloudRewriteProvider
from ..cloud.prompts import get_system_prompt
from ..cloud.registry import create_provider
from ..core.config import EnhancementPreferences
from ..core.logging import setup_logging
from ..errors import CloudRewriteFailure, PolishError, UnsupportedProviderError
from ..learning.store import LearningPatternStore
from ..nlp.sentence_analyzer import SentenceAnalyzer
from ..types import DocumentType, EnhancedText, VoiceCommandInstruction
from .fillers import FillerRemover
from .formatter import FormatApplier
from .self_correction import SelfCorrectionExcisor
from .voice_commands import LEADING_SEPARATORS, VoiceCommandParser

logger = setup_logging(__name__)

HORIZONTAL_WHITESPACE_PATTERN = re.compile(r"[ \t]+")
TRUNCATION_WARNING_MIN_LENGTH = 200
TRUNCATION_WARNING_RATIO = 0.5

ProviderFactory = Callable[..., CloudRewriteProvider]


def normalize_text(text: str) -> str:
    """Trim, NFC-compose, normalize line endings and collapse runs of spaces."""
    normalized = unicodedata.normalize("NFC", text.strip())
    normalized = normalized.replace("\r\n", "\n").replace("\r", "\n")
    normalized = HORIZONTAL_WHITESPACE_PATTERN.sub(" ", normalized)
    return normalized.strip()


def count_replaced_tokens(before: str, after: str) -> int:
    matcher = difflib.SequenceMatcher(a=before.split(), b=after.split(), autojunk=False)
    return sum(
        max(i2 - i1, j2 - j1) for tag, i1, i2, j1, j2 in matcher.get_opcodes() if tag == "replace"
    )


class TextEnhancementPipeline:
    def __init__(
        self,
        preferences: EnhancementPreferences | None = None,
        classifier: TextClassificationService | None = None,
        learning_store: LearningPatternStore | None = None,
        voice_parser: VoiceCommandParser | None = None,
        excisor: SelfCorrectionExcisor | None = None,
        filler_remover: FillerRemover | None = None,
        sentence_analyzer: SentenceAnalyzer | None = None,
        format_applier: FormatApplier | None = None,
        provider_factory: ProviderFactory = create_provider,
        provider_options: dict[str, Any] | None = None,
        prompt_overrides: dict[str, str] | None = None,
    ):
        self.preferences = preferences or EnhancementPreferences()
        self.classifier = classifier
        self.learning_store = learning_store
        self.voice_parser = voice_parser or VoiceCommandParser()
        self.excisor = excisor or SelfCorrectionExcisor()
        self.filler_remover = filler_remover or FillerRemover()
        self.sentence_analyzer = sentence_analyzer or SentenceAnalyzer()
        self.format_applier = format_applier or FormatApplier()
        self.provider_factory = provider_factory
        self.provider_options = provider_options or {}
        self.prompt_overrides = prompt_overrides or {}

    async def enhance(
        self,
        text: str,
        document_type: DocumentType = DocumentType.UNKNOWN,
        apply_learning: bool = True,
        use_cloud: bool = False,
    ) -> EnhancedText:
        prefs = self.preferences
        rules: list[str] = []
        current = text

        # Stage -1: explicit voice command overrides classification
        instruction = self.voice_parser.parse(current) if prefs.detect_voice_commands else None
        if instruction is not None:
            document_type = instruction.target_document_type
            rules.append(f"voice_command_{document_type.value}")
            if instruction.recipient:
                rules.append("recipient")
            fallback = self._strip_command_prefix(current, instruction)
            current = self._keep_non_empty(fallback, instruction.content, "voice_command")

        # Stage 0
        if document_type == DocumentType.UNKNOWN and self.classifier is not None:
            document_type = self._classify(current, rules)

        # Stage 1
        current = self._keep_non_empty(current, normalize_text(current), "normalize")
        rules.append("normalize")

        # Stage 2
        if prefs.remove_self_corrections:
            corrections = self.excisor.analyze_corrections(current)
            if corrections:
                logger.info(f"Self-corrections found: {[marker for marker, _ in corrections]}")
            current = self._keep_non_empty(current, self.excisor.process(current), "self_correction")
            rules.append("self_correction")

        # Stage 3
        if prefs.remove_filler_words:
            result = self.filler_remover.remove(current)
            current = self._keep_non_empty(current, result.text, "remove_fillers")
            rules.append("remove_fillers")

        # Stage 4
        if prefs.auto_punctuate or prefs.auto_capitalize:
            punctuated = self.sentence_analyzer.enhance(
                current,
                auto_punctuate=prefs.auto_punctuate,
                auto_capitalize=prefs.auto_capitalize,
                document_type=document_type,
            )
            current = self._keep_non_empty(current, punctuated, "punctuate_capitalize")
            rules.append("punctuate_capitalize")

        # Stage 5
        if prefs.apply_formatting:
            formatted = self._format(current, document_type, instruction)
            current = self._keep_non_empty(current, formatted, "format")
            rules.append(f"format_{document_type.value}")

        # Stage 6
        learned_count = 0
        if apply_learning and prefs.apply_learning_patterns and self.learning_store is not None:
            learned = self._apply_learning(current, document_type)
            if learned != current:
                learned_count = count_replaced_tokens(current, learned) or 1
                current = learned
                rules.append("learned_patterns")

        # Stage 7
        if use_cloud and self._cloud_allowed(document_type):
            rewritten = await self._cloud_rewrite(current, document_type)
            if rewritten is not None:
                current = rewritten
                rules.append("cloud_enhance")

        self._warn_on_truncation(text, current)

        return EnhancedText(
            original_text=text,
            enhanced_text=current,
            document_type=document_type,
            applied_rules=tuple(rules),
            learned_patterns_applied=learned_count,
            cloud_enhanced=use_cloud,
            cloud_provider=prefs.cloud_provider if use_cloud else None,
        )

    def _classify(self, text: str, rules: list[str]) -> DocumentType:
        try:
            result = self.classifier.classify(text)
        except PolishError as e:
            logger.warning(f"Classification failed, continuing as unknown: {e}")
            return DocumentType.UNKNOWN
        except Exception as e:
            logger.error(f"Unexpected classifier error, continuing as unknown: {e}")
            return DocumentType.UNKNOWN
        rules.append("classify")
        logger.debug(f"Auto-detected document type: {result.category.value}")
        return result.category

    def _format(
        self, text: str, document_type: DocumentType, instruction: VoiceCommandInstruction | None
    ) -> str:
        recipient = instruction.recipient if instruction else None
        metadata = instruction.metadata if instruction else {}
        return self.format_applier.apply(text, document_type, recipient=recipient, metadata=metadata).text

    def _apply_learning(self, text: str, document_type: DocumentType) -> str:
        try:
            learned = self.learning_store.apply_learned(text, document_type)
        except Exception as e:
            logger.warning(f"Learning patterns not applied: {e}")
            return text
        if not isinstance(learned, str) or not learned.strip():
            logger.warning("Learning store returned empty text; ignoring")
            return text
        return learned

    def _cloud_allowed(self, document_type: DocumentType) -> bool:
        prefs = self.preferences
        if not prefs.cloud_enabled:
            logger.debug("Cloud rewrite requested but globally disabled")
            return False
        if not prefs.cloud_enabled_for(document_type):
            logger.debug(f"Cloud rewrite disabled for {document_type.value}")
            return False
        if not prefs.has_api_key:
            logger.warning("Cloud rewrite requested but no API key is configured")
            return False
        return True

    async def _cloud_rewrite(self, text: str, document_type: DocumentType) -> str | None:
        prefs = self.preferences
        try:
            provider = self.provider_factory(
                prefs.cloud_provider,
                prefs.cloud_api_key,
                prefs.cloud_timeout_s,
                **self.provider_options,
            )
        except UnsupportedProviderError as e:
            logger.error(f"Cloud rewrite skipped: {e}")
            return None

        prompt = get_system_prompt(document_type, self.prompt_overrides)
        try:
            rewritten = await asyncio.wait_for(
                provider.enhance(text, document_type, prompt), timeout=prefs.cloud_timeout_s
            )
        except asyncio.TimeoutError:
            logger.warning(f"Cloud rewrite via {prefs.cloud_provider} timed out after {prefs.cloud_timeout_s}s")
            return None
        except CloudRewriteFailure as e:
            logger.warning(f"Cloud rewrite via {prefs.cloud_provider} failed: {e}")
            return None
        except Exception as e:
            logger.error(f"Unexpected cloud rewrite error via {prefs.cloud_provider}: {e}")
            return None

        if not isinstance(rewritten, str) or not rewritten.strip():
            logger.warning("Cloud provider returned empty text; keeping local result")
            return None
        return rewritten.strip()

    @staticmethod
    def _strip_command_prefix(text: str, instruction: VoiceCommandInstruction) -> str:
        trimmed = text.strip()
        if trimmed.lower().startswith(instruction.prefix.lower()):
            trimmed = trimmed[len(instruction.prefix):]
        return trimmed.lstrip(LEADING_SEPARATORS) or text

    @staticmethod
    def _keep_non_empty(previous: str, candidate: str, stage: str) -> str:
        if candidate.strip() or not previous.strip():
            return candidate
        logger.warning(f"Stage '{stage}' produced empty text; keeping previous text")
        return previous

    @staticmethod
    def _warn_on_truncation(original: str, enhanced: str) -> None:
        if len(original) > TRUNCATION_WARNING_MIN_LENGTH and len(enhanced) < len(original) * TRUNCATION_WARNING_RATIO:
            logger.warning(
                f"Enhanced text is much shorter than the original ({len(enhanced)} vs {len(original)} chars)"
            )


__all__ = ["TextEnhancementPipeline", "normalize_text", "count_replaced_tokens"]
