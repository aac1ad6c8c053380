"""Linguistic signals: features, category voting and sentence analysis."""

from .features import FeatureExtractor
from .sentence_analyzer import SentenceAnalyzer, SentenceType
from .voter import VOTE_RULES, DominantCharacteristicVoter, VoteRule

__all__ = [
    "FeatureExtractor",
    "SentenceAnalyzer",
    "SentenceType",
    "DominantCharacteristicVoter",
    "VoteRule",
    "VOTE_RULES",
]
