#!/usr/bin/env python3
"""Per-sentence type detection, punctuation and capitalization."""

from __future__ import annotations

import re
from enum import Enum

from ..core.logging import setup_logging
from ..types import DocumentType

logger = setup_logging(__name__)


class SentenceType(Enum):
    QUESTION = "question"
    STATEMENT = "statement"
    EXCLAMATION = "exclamation"
    COMMAND = "command"


# ==============================================================================
# WORD SETS
# ==============================================================================

QUESTION_WORDS = frozenset({
    "who", "what", "when", "where", "why", "how", "which", "whose", "whom",
    "can", "could", "would", "should", "will", "shall", "do", "does", "did",
    "is", "are", "was", "were", "has", "have", "had",
})

COMMAND_VERBS = frozenset({
    "add", "create", "delete", "remove", "update", "change", "send", "write",
    "read", "open", "close", "start", "stop", "run", "execute", "show",
    "display", "hide", "find", "search",
})

TAG_QUESTION_SUFFIXES = (
    "isn't it", "aren't they", "wasn't it", "weren't they", "don't you",
    "doesn't it", "didn't they", "can't you", "couldn't you", "won't you",
    "wouldn't you", "shouldn't you", "isn't that", "right",
)

WH_WORDS = frozenset({"what", "how", "why", "when", "where", "which", "who"})

MODALS_AND_AUXILIARIES = frozenset({
    "can", "could", "should", "would", "will", "shall", "do", "does", "did",
    "is", "are", "was", "were", "have", "has", "had",
})

SUBJECT_PRONOUNS = frozenset({"i", "you", "we", "they", "it", "he", "she", "there"})

# Discourse words skipped before checking for inverted word order
LEADING_DISCOURSE_WORDS = frozenset({"so", "and", "but", "okay", "well", "hey", "then", "now"})

EXCLAMATION_WORDS = frozenset({"wow", "amazing", "incredible", "great", "awesome"})

TERMINATORS = {
    SentenceType.QUESTION: "?",
    SentenceType.EXCLAMATION: "!",
    SentenceType.STATEMENT: ".",
    SentenceType.COMMAND: ".",
}

SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+(?=\s|$)")
SENTENCE_START_PATTERN = re.compile(r"(^|[.!?]\s+)(\W*)(\w)")
TRAILING_PUNCTUATION = ".!?,;:"
WORD_EDGE_PUNCTUATION = ".,!?;:\"'()"
STANDALONE_I_PATTERN = re.compile(r"\bi\b(?!\.\w)")


def _words(sentence: str) -> list[str]:
    return [w.strip(WORD_EDGE_PUNCTUATION) for w in sentence.lower().split() if w.strip(WORD_EDGE_PUNCTUATION)]


class SentenceAnalyzer:
    """Splits text into sentences and punctuates each one by its detected type."""

    def detect_type(self, sentence: str) -> SentenceType:
        words = _words(sentence)
        if not words:
            return SentenceType.STATEMENT

        first = words[0]
        if first in QUESTION_WORDS:
            return SentenceType.QUESTION

        if first in COMMAND_VERBS and len(words) >= 2:
            return SentenceType.COMMAND

        if self._has_inverted_order(words):
            return SentenceType.QUESTION

        lowered = " ".join(words)
        if any(lowered.endswith(suffix) for suffix in TAG_QUESTION_SUFFIXES) and len(words) > 1:
            return SentenceType.QUESTION

        for current, following in zip(words, words[1:]):
            if current in WH_WORDS and following in MODALS_AND_AUXILIARIES:
                return SentenceType.QUESTION

        if words[-1] in EXCLAMATION_WORDS:
            return SentenceType.EXCLAMATION

        return SentenceType.STATEMENT

    def _has_inverted_order(self, words: list[str]) -> bool:
        index = 0
        while index < len(words) - 1 and words[index] in LEADING_DISCOURSE_WORDS:
            index += 1
        if index + 1 >= len(words):
            return False
        return words[index] in QUESTION_WORDS and words[index + 1] in SUBJECT_PRONOUNS

    def split(self, text: str) -> list[str]:
        """Split on terminator runs, dropping the terminators and empty pieces."""
        return [piece.strip() for piece in SENTENCE_SPLIT_PATTERN.split(text) if piece.strip()]

    def apply_punctuation(self, text: str) -> str:
        punctuated = []
        for sentence in self.split(text):
            body = sentence.rstrip(TRAILING_PUNCTUATION).rstrip()
            if not body:
                continue
            punctuated.append(body + TERMINATORS[self.detect_type(body)])
        return " ".join(punctuated)

    def capitalize_sentences(self, text: str, document_type: DocumentType = DocumentType.UNKNOWN) -> str:
        capitalized = SENTENCE_START_PATTERN.sub(
            lambda m: m.group(1) + m.group(2) + m.group(3).upper(), text
        )
        # "i" is a common identifier in code
        if document_type == DocumentType.CODE:
            return capitalized
        return STANDALONE_I_PATTERN.sub("I", capitalized)

    def enhance(
        self,
        text: str,
        auto_punctuate: bool = True,
        auto_capitalize: bool = True,
        document_type: DocumentType = DocumentType.UNKNOWN,
    ) -> str:
        result = text
        if auto_punctuate:
            result = self.apply_punctuation(result)
        if auto_capitalize:
            result = self.capitalize_sentences(result, document_type)
        logger.debug(f"Sentence analysis: '{text[:40]}' -> '{result[:40]}'")
        return result


__all__ = ["SentenceType", "SentenceAnalyzer"]
