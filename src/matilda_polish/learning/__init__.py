"""Personalisation from the user's own edits."""

from .store import (
    InMemoryLearningStore,
    LearningPattern,
    LearningPatternStore,
    extract_token_replacements,
    levenshtein_distance,
    similarity,
)

__all__ = [
    "InMemoryLearningStore",
    "LearningPattern",
    "LearningPatternStore",
    "extract_token_replacements",
    "levenshtein_distance",
    "similarity",
]
