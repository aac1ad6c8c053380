"""Small sentence helpers shared by the formatting stages."""

from __future__ import annotations

import re

SENTENCE_PATTERN = re.compile(r".+?(?:[.!?]+(?=\s|$)|$)", re.DOTALL)
TERMINAL_PUNCTUATION = (".", "!", "?")


def split_sentences(text: str) -> list[str]:
    """Split text into sentences, keeping each sentence's terminator."""
    return [s.strip() for s in SENTENCE_PATTERN.findall(text) if s.strip()]


def capitalize_first(text: str) -> str:
    for index, char in enumerate(text):
        if char.isalpha():
            return text[:index] + char.upper() + text[index + 1:]
    return text


def ensure_terminal_punctuation(text: str, mark: str = ".") -> str:
    stripped = text.rstrip()
    if not stripped or stripped.endswith(TERMINAL_PUNCTUATION):
        return stripped
    return stripped + mark


def group_paragraphs(sentences: list[str], size: int = 3) -> str:
    paragraphs = [" ".join(sentences[i: i + size]) for i in range(0, len(sentences), size)]
    return "\n\n".join(paragraphs)


def word_count(text: str) -> int:
    return len(text.split())


def truncate_words(text: str, limit: int) -> str:
    return " ".join(text.split()[:limit])


__all__ = [
    "split_sentences",
    "capitalize_first",
    "ensure_terminal_punctuation",
    "group_paragraphs",
    "word_count",
    "truncate_words",
]
