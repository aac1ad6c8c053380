"""Learned edit patterns: user corrections replayed on future transcripts."""

from __future__ import annotations

import math
import re
import string
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Protocol

from ..core.logging import setup_logging
from ..errors import LearningApplyFailure
from ..types import DocumentType

logger = setup_logging(__name__)

TRUSTED_CONFIDENCE = 0.7
SIGNIFICANT_EDIT_RATIO = 0.1
MERGE_SIMILARITY = 0.95
MIN_REPLACED_TOKEN_LENGTH = 3
MAX_REPLACEMENTS = 100
MAX_REPLACEMENT_LENGTH = 50


@dataclass
class LearningPattern:
    document_type: DocumentType
    original_text: str
    edited_text: str
    frequency: int = 1
    confidence: float = 1.0
    last_seen: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def is_trusted(self) -> bool:
        return self.confidence >= TRUSTED_CONFIDENCE

    @property
    def is_significant_edit(self) -> bool:
        if not self.original_text:
            return False
        change = abs(len(self.edited_text) - len(self.original_text)) / len(self.original_text)
        return change >= SIGNIFICANT_EDIT_RATIO

    def update_confidence(self) -> None:
        # Ten repetitions reach full confidence
        self.confidence = min(1.0, math.log10(self.frequency + 1) / math.log10(11))


class LearningPatternStore(Protocol):
    def apply_learned(self, text: str, document_type: DocumentType) -> str:
        ...

    def find_similar_patterns(
        self, text: str, document_type: DocumentType, threshold: float = 0.8
    ) -> list[LearningPattern]:
        ...


def levenshtein_distance(a: str, b: str) -> int:
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            cost = 0 if char_a == char_b else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return previous[-1]


def similarity(a: str, b: str) -> float:
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / longest


def extract_token_replacements(original: str, edited: str) -> list[tuple[str, str]]:
    """Position-aligned word substitutions between two versions of a text."""
    replacements = []
    for orig_word, edit_word in zip(original.split(), edited.split()):
        source = orig_word.strip(string.punctuation)
        target = edit_word.strip(string.punctuation)
        if source.lower() != target.lower() and len(source) >= MIN_REPLACED_TOKEN_LENGTH:
            replacements.append((source, target))
    return replacements


class InMemoryLearningStore:
    """Process-local pattern store keyed by document type."""

    def __init__(self) -> None:
        self._patterns: list[LearningPattern] = []
        self._lock = threading.Lock()

    @property
    def patterns(self) -> list[LearningPattern]:
        with self._lock:
            return list(self._patterns)

    def record(self, original: str, edited: str, document_type: DocumentType) -> LearningPattern | None:
        """Remember that the user rewrote ``original`` as ``edited``."""
        candidate = LearningPattern(document_type, original, edited)
        if not candidate.is_significant_edit:
            logger.debug("Ignoring insignificant edit")
            return None

        existing = self.find_similar_patterns(original, document_type, threshold=MERGE_SIMILARITY)
        with self._lock:
            if existing:
                pattern = existing[0]
                pattern.frequency += 1
                pattern.edited_text = edited
                pattern.last_seen = datetime.now(timezone.utc)
                previous = pattern.confidence
                pattern.update_confidence()
                pattern.confidence = max(previous, pattern.confidence)
                return pattern
            self._patterns.append(candidate)
            return candidate

    def find_similar_patterns(
        self, text: str, document_type: DocumentType, threshold: float = 0.8
    ) -> list[LearningPattern]:
        with self._lock:
            candidates = [p for p in self._patterns if p.document_type == document_type]
        scored = [(similarity(text, p.original_text), p) for p in candidates]
        matched = [(score, p) for score, p in scored if score >= threshold]
        matched.sort(key=lambda item: item[0], reverse=True)
        return [p for _, p in matched]

    def apply_learned(self, text: str, document_type: DocumentType) -> str:
        with self._lock:
            trusted = [p for p in self._patterns if p.document_type == document_type and p.is_trusted]

        replacements = []
        for pattern in trusted:
            replacements.extend(extract_token_replacements(pattern.original_text, pattern.edited_text))

        if len(replacements) > MAX_REPLACEMENTS:
            logger.warning(f"Learning patterns look corrupted ({len(replacements)} replacements); skipping")
            return text
        suspicious = [r for r in replacements if len(r[1]) > MAX_REPLACEMENT_LENGTH]
        if suspicious:
            logger.warning(f"Learning patterns contain {len(suspicious)} suspicious replacement(s); skipping")
            return text

        improved = text
        for source, target in replacements:
            try:
                improved = re.sub(r"\b" + re.escape(source) + r"\b", lambda _: target, improved, flags=re.IGNORECASE)
            except re.error as e:
                raise LearningApplyFailure(f"Bad learned replacement {source!r}: {e}") from e

        if improved != text:
            logger.info(f"Applied {len(replacements)} learned replacement(s)")
        return improved


__all__ = [
    "LearningPattern",
    "LearningPatternStore",
    "InMemoryLearningStore",
    "levenshtein_distance",
    "similarity",
    "extract_token_replacements",
]
