#!/usr/bin/env python3
"""Context-aware removal of spoken filler words."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from ..core.logging import setup_logging
from .patterns import FILLER_CONTEXT_WINDOW, FILLER_WORDS, PROTECTED_FILLER_CONTEXTS

logger = setup_logging(__name__)

MULTIPLE_SPACES_PATTERN = re.compile(r" {2,}")
SPACE_BEFORE_PUNCTUATION_PATTERN = re.compile(r" +([,.?!])")
LEADING_COMMA_PATTERN = re.compile(r"^\s*,\s*")
REPEATED_COMMA_PATTERN = re.compile(r",(?:\s*,)+")


@dataclass
class FillerRemovalResult:
    text: str
    removed_fillers: list[str] = field(default_factory=list)


class FillerRemover:
    def __init__(
        self,
        fillers: Sequence[str] = FILLER_WORDS,
        protected_contexts: Mapping[str, Sequence[str]] = PROTECTED_FILLER_CONTEXTS,
        window: int = FILLER_CONTEXT_WINDOW,
    ):
        self.fillers = tuple(fillers)
        self.protected_contexts = {k.lower(): tuple(v) for k, v in protected_contexts.items()}
        self.window = window
        self._patterns = [
            (filler, re.compile(r"\b" + re.escape(filler) + r"\b", re.IGNORECASE)) for filler in self.fillers
        ]

    def remove(self, text: str) -> FillerRemovalResult:
        cleaned = text
        removed: list[str] = []

        for filler, pattern in self._patterns:
            removed_here = []
            for match in reversed(list(pattern.finditer(cleaned))):
                if self._is_protected(cleaned, match, filler):
                    continue
                removed_here.append(match.group(0))
                cleaned = cleaned[: match.start()] + cleaned[match.end():]
            removed.extend(reversed(removed_here))

        cleaned = self._cleanup(cleaned)
        if removed:
            logger.debug(f"Removed {len(removed)} filler(s): {removed}")
        return FillerRemovalResult(text=cleaned, removed_fillers=removed)

    def _is_protected(self, text: str, match: re.Match[str], filler: str) -> bool:
        phrases = self.protected_contexts.get(filler.lower())
        if not phrases:
            return False

        window_start = max(0, match.start() - self.window)
        window_end = min(len(text), match.end() + self.window)
        context = text[window_start:window_end].lower()
        filler_start = match.start() - window_start
        filler_end = match.end() - window_start

        for phrase in phrases:
            for found in re.finditer(re.escape(phrase), context):
                # Protected only when the phrase covers this very occurrence
                if found.start() <= filler_start and found.end() >= filler_end:
                    return True
        return False

    @staticmethod
    def _cleanup(text: str) -> str:
        cleaned = MULTIPLE_SPACES_PATTERN.sub(" ", text)
        cleaned = SPACE_BEFORE_PUNCTUATION_PATTERN.sub(r"\1", cleaned)
        cleaned = REPEATED_COMMA_PATTERN.sub(",", cleaned)
        cleaned = LEADING_COMMA_PATTERN.sub("", cleaned)
        return cleaned.strip()


__all__ = ["FillerRemover", "FillerRemovalResult"]
