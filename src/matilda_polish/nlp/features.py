#!/usr/bin/env python3
"""Feature extraction for document-type classification."""

from __future__ import annotations

import re
import unicodedata
from typing import Any

from ..types import TextFeatures
from .nlp_provider import get_nlp

# ==============================================================================
# VOCABULARY TABLES
# ==============================================================================

GREETING_WORDS = frozenset({"hey", "hi", "hello", "dear", "greetings"})

SIGNATURE_PHRASES = ("regards", "thanks", "best", "sincerely", "cheers", "thank you")

TECHNICAL_TERMS = (
    "function", "var", "let", "const", "def", "class", "struct", "enum",
    "import", "export", "return", "if", "else", "for", "while", "switch",
    "case", "break", "continue", "try", "catch", "throw", "async", "await",
    "func", "public", "private", "static", "final", "override", "init",
    "protocol", "extension", "typealias", "guard", "defer", "inout",
)

CODE_PUNCTUATION = ("()", "{}", "[]", "=>", "->", "==", "!=", "&&", "||")

FORMAL_WORDS = (
    "hereby", "pursuant", "therefore", "furthermore", "moreover", "consequently",
    "regards", "sincerely", "cordially", "respectfully", "kindly", "please",
    "attached", "enclosed", "following", "regarding", "concerning", "reference",
)

GREETING_WINDOW = 5

TECHNICAL_TERM_PATTERN = re.compile(
    r"\b(?:" + "|".join(re.escape(term) for term in TECHNICAL_TERMS) + r")\b"
)


class FeatureExtractor:
    """Derives TextFeatures from raw text. Stateless and deterministic."""

    def __init__(self, nlp: Any | None = None):
        self.nlp = nlp or get_nlp()

    def extract(self, text: str) -> TextFeatures:
        doc = self.nlp(text)
        sentence_count = max(sum(1 for _ in doc.sents), 1)
        word_count = sum(1 for token in doc if not (token.is_punct or token.is_space))
        lowered = text.lower()
        has_complete = text.strip().endswith((".", "!", "?"))

        return TextFeatures(
            sentence_count=sentence_count,
            word_count=word_count,
            average_sentence_length=word_count / sentence_count if sentence_count else 0.0,
            has_complete_sentences=has_complete,
            formality_score=self._formality_score(text, lowered, word_count, has_complete),
            technical_term_count=self._technical_term_count(text, lowered),
            punctuation_density=self._punctuation_density(text),
            has_greeting=self._has_greeting(lowered),
            has_signature=any(phrase in lowered for phrase in SIGNATURE_PHRASES),
        )

    def _has_greeting(self, lowered: str) -> bool:
        return any(token in GREETING_WORDS for token in lowered.split()[:GREETING_WINDOW])

    def _technical_term_count(self, text: str, lowered: str) -> int:
        count = len(TECHNICAL_TERM_PATTERN.findall(lowered))
        count += sum(1 for pattern in CODE_PUNCTUATION if pattern in text)
        return count

    def _punctuation_density(self, text: str) -> float:
        if not text:
            return 0.0
        punctuation = sum(1 for char in text if unicodedata.category(char).startswith("P"))
        return punctuation / len(text)

    def _formality_score(self, text: str, lowered: str, word_count: int, has_complete: bool) -> float:
        score = 0.0
        if word_count > 0:
            formal_count = sum(1 for word in FORMAL_WORDS if word in lowered)
            score = formal_count / word_count * 10

        if has_complete:
            score += 0.2
        if "!!" in text or "..." in text:
            score -= 0.2

        # Shouting lowers formality
        for word in text.split():
            if len(word) > 1 and word == word.upper() and any(c.isalpha() for c in word):
                score -= 0.1

        return score


__all__ = ["FeatureExtractor"]
