"""Rule-based dominant-characteristic voting across document categories."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..types import KNOWN_CATEGORIES, DocumentType, TextFeatures

Weight = int | Callable[[TextFeatures], int]


@dataclass(frozen=True)
class VoteRule:
    category: DocumentType
    weight: Weight
    condition: Callable[[TextFeatures], bool]
    description: str = ""

    def score(self, features: TextFeatures) -> int:
        if not self.condition(features):
            return 0
        return self.weight(features) if callable(self.weight) else self.weight


# Empirically tuned weights. Changing any value is a behaviour change and
# needs new fixtures.
VOTE_RULES: tuple[VoteRule, ...] = (
    # email
    VoteRule(DocumentType.EMAIL, 3, lambda f: f.has_greeting and f.formality_score > 0.6, "formal greeting"),
    VoteRule(DocumentType.EMAIL, 2, lambda f: f.has_signature, "signature"),
    VoteRule(
        DocumentType.EMAIL, 2,
        lambda f: f.formality_score > 0.7 and f.average_sentence_length > 15,
        "long formal sentences",
    ),
    # message
    VoteRule(DocumentType.MESSAGE, 3, lambda f: f.has_greeting and f.formality_score < 0.5, "casual greeting"),
    VoteRule(DocumentType.MESSAGE, 2, lambda f: f.word_count < 30 and f.has_greeting, "short greeting"),
    VoteRule(
        DocumentType.MESSAGE, 2,
        lambda f: not f.has_complete_sentences and f.word_count < 20,
        "short fragment",
    ),
    # document
    VoteRule(DocumentType.DOCUMENT, 2, lambda f: f.word_count > 100, "long text"),
    VoteRule(DocumentType.DOCUMENT, 3, lambda f: f.formality_score > 0.8, "very formal"),
    VoteRule(
        DocumentType.DOCUMENT, 2,
        lambda f: f.has_complete_sentences and f.average_sentence_length > 20,
        "long complete sentences",
    ),
    VoteRule(DocumentType.DOCUMENT, 1, lambda f: f.sentence_count > 5, "many sentences"),
    # social
    VoteRule(
        DocumentType.SOCIAL, 2,
        lambda f: f.word_count < 50 and not f.has_greeting and not f.has_signature,
        "short unaddressed",
    ),
    VoteRule(DocumentType.SOCIAL, 2, lambda f: f.punctuation_density > 0.15, "punctuation heavy"),
    VoteRule(DocumentType.SOCIAL, 2, lambda f: f.formality_score < 0.3 and f.word_count < 40, "casual short"),
    # code
    VoteRule(
        DocumentType.CODE, lambda f: f.technical_term_count,
        lambda f: f.technical_term_count > 0, "technical terms",
    ),
    VoteRule(
        DocumentType.CODE, 2,
        lambda f: f.punctuation_density > 0.2 and f.technical_term_count > 0,
        "symbol-dense code",
    ),
    VoteRule(
        DocumentType.CODE, 3,
        lambda f: not f.has_complete_sentences and f.technical_term_count > 2,
        "code fragment",
    ),
    # search
    VoteRule(
        DocumentType.SEARCH, 3,
        lambda f: f.word_count <= 10 and not f.has_complete_sentences,
        "short incomplete",
    ),
    VoteRule(
        DocumentType.SEARCH, 2,
        lambda f: not f.has_greeting and not f.has_signature and f.word_count < 15,
        "short keywords",
    ),
    VoteRule(
        DocumentType.SEARCH, 2,
        lambda f: f.punctuation_density < 0.05 and f.word_count < 10,
        "bare keywords",
    ),
)


class DominantCharacteristicVoter:
    """Scores the six categories and overrides the model only on a clear winner."""

    def __init__(self, rules: tuple[VoteRule, ...] = VOTE_RULES):
        self.rules = rules

    def score(self, features: TextFeatures) -> dict[DocumentType, int]:
        scores = {category: 0 for category in KNOWN_CATEGORIES}
        for rule in self.rules:
            scores[rule.category] += rule.score(features)
        return scores

    def analyze(self, text: str, features: TextFeatures, baseline: DocumentType) -> DocumentType:
        ranked = sorted(self.score(features).items(), key=lambda item: item[1], reverse=True)
        (top_category, top_score), (_, second_score) = ranked[0], ranked[1]
        if top_score > second_score:
            return top_category
        return baseline


__all__ = ["VoteRule", "VOTE_RULES", "DominantCharacteristicVoter"]
