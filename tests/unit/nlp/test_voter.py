"""Tests for the dominant-characteristic voter."""

from matilda_polish.nlp.voter import VOTE_RULES, DominantCharacteristicVoter
from matilda_polish.types import KNOWN_CATEGORIES, DocumentType, TextFeatures


class TestScoring:
    """Per-category scores follow the weighted rule table."""

    def test_every_rule_targets_a_known_category(self):
        assert {rule.category for rule in VOTE_RULES} == set(KNOWN_CATEGORIES)

    def test_scores_cover_all_six_categories(self, neutral_features):
        scores = DominantCharacteristicVoter().score(neutral_features)
        assert set(scores) == set(KNOWN_CATEGORIES)
        assert all(score == 0 for score in scores.values())

    def test_technical_term_weight_scales_with_count(self):
        voter = DominantCharacteristicVoter()
        features = TextFeatures(
            word_count=60, has_complete_sentences=True, formality_score=0.5,
            punctuation_density=0.1, technical_term_count=2, sentence_count=3,
        )
        assert voter.score(features)[DocumentType.CODE] == 2

    def test_code_fragment_scores(self):
        features = TextFeatures(
            word_count=12, technical_term_count=4, punctuation_density=0.25,
            has_complete_sentences=False,
        )
        scores = DominantCharacteristicVoter().score(features)
        # 4 (terms) + 2 (symbol dense) + 3 (fragment)
        assert scores[DocumentType.CODE] == 9
        assert scores[DocumentType.SOCIAL] == 6


class TestAnalyze:
    """Override the baseline only on a strict winner."""

    def test_clear_winner_overrides_baseline(self, email_features):
        voter = DominantCharacteristicVoter()
        assert voter.analyze("Hi there", email_features, DocumentType.SEARCH) == DocumentType.EMAIL

    def test_no_votes_keeps_baseline(self, neutral_features):
        voter = DominantCharacteristicVoter()
        assert voter.analyze("text", neutral_features, DocumentType.DOCUMENT) == DocumentType.DOCUMENT

    def test_tie_keeps_baseline(self):
        # document (many sentences) and code (one technical term) both score 1
        features = TextFeatures(
            sentence_count=6, word_count=60, average_sentence_length=10.0,
            has_complete_sentences=True, formality_score=0.5,
            technical_term_count=1, punctuation_density=0.1,
        )
        voter = DominantCharacteristicVoter()
        scores = voter.score(features)
        assert scores[DocumentType.DOCUMENT] == scores[DocumentType.CODE] == 1

        assert voter.analyze("text", features, DocumentType.MESSAGE) == DocumentType.MESSAGE

    def test_code_fragment_wins(self):
        features = TextFeatures(
            word_count=12, technical_term_count=4, punctuation_density=0.25,
        )
        voter = DominantCharacteristicVoter()
        assert voter.analyze("const x = () => {}", features, DocumentType.SEARCH) == DocumentType.CODE
