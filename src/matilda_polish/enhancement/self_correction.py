#!/usr/bin/env python3
"""Excision of spoken self-corrections ("meet at 3, oh no, make it 4")."""

from __future__ import annotations

import re
from collections.abc import Sequence

from ..core.logging import setup_logging
from .patterns import CLAUSE_BOUNDARIES, CORRECTION_MARKERS, SENTENCE_BOUNDARY_PATTERN

logger = setup_logging(__name__)

SKIPPED_AFTER_MARKER = " \t\n,"


def _marker_pattern(marker: str) -> re.Pattern[str]:
    return re.compile(r"\b" + re.escape(marker) + r"\b", re.IGNORECASE)


class SelfCorrectionExcisor:
    """Drops the retracted clause before each correction marker."""

    def __init__(self, markers: Sequence[str] = CORRECTION_MARKERS):
        self.markers = tuple(markers)

    def _sorted_markers(self) -> list[str]:
        return sorted(self.markers, key=len, reverse=True)

    def process(self, text: str) -> str:
        result = text
        for marker in self._sorted_markers():
            result = self._apply_marker(result, marker)
        return result

    def _apply_marker(self, text: str, marker: str) -> str:
        match = _marker_pattern(marker).search(text)
        if match is None:
            return text

        before = text[: match.start()]
        cut = self._find_cut_point(before)
        kept = before[:cut].strip()

        resume = match.end()
        while resume < len(text) and text[resume] in SKIPPED_AFTER_MARKER:
            resume += 1
        corrected = text[resume:]

        logger.debug(f"Self-correction '{marker}' at {match.start()}, cut at {cut}")

        if not kept:
            return corrected
        if not corrected:
            return kept
        if self._ends_with_punctuation(kept):
            return f"{kept} {corrected}"
        return f"{kept}. {corrected}"

    def _find_cut_point(self, before: str) -> int:
        boundaries = list(SENTENCE_BOUNDARY_PATTERN.finditer(before))
        if boundaries:
            return boundaries[-1].start() + 1

        stripped = before.rstrip()
        if stripped.endswith((".", "!", "?")):
            return len(before)

        comma = before.rfind(",")
        if comma != -1:
            return comma + 1

        clause_end = max(
            (before.rfind(phrase) + len(phrase) for phrase in CLAUSE_BOUNDARIES if phrase in before),
            default=0,
        )
        return clause_end

    @staticmethod
    def _ends_with_punctuation(text: str) -> bool:
        return bool(text) and not text[-1].isalnum() and not text[-1].isspace()

    def analyze_corrections(self, text: str) -> list[tuple[str, int]]:
        """Markers present in ``text`` with their positions, in document order."""
        found = []
        for marker in self.markers:
            match = _marker_pattern(marker).search(text)
            if match is not None:
                found.append((marker, match.start()))
        return sorted(found, key=lambda item: item[1])


__all__ = ["SelfCorrectionExcisor"]
