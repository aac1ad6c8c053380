"""Tests for learned edit patterns."""

import pytest

from matilda_polish.learning.store import (
    InMemoryLearningStore,
    LearningPattern,
    extract_token_replacements,
    levenshtein_distance,
    similarity,
)
from matilda_polish.types import DocumentType


class TestHelpers:

    def test_levenshtein(self):
        assert levenshtein_distance("kitten", "sitting") == 3
        assert levenshtein_distance("", "abc") == 3

    def test_similarity(self):
        assert similarity("", "") == 1.0
        assert similarity("abcd", "abcd") == 1.0
        assert similarity("abcd", "abce") == 0.75

    def test_token_replacements_skip_short_words(self):
        assert extract_token_replacements("go to it", "go at it") == []

    def test_token_replacements_strip_punctuation(self):
        assert extract_token_replacements("meet at the cafe.", "meet at the bistro.") == [("cafe", "bistro")]


class TestLearningPattern:

    def test_confidence_grows_with_frequency(self):
        pattern = LearningPattern(DocumentType.EMAIL, "a", "b", frequency=1)
        pattern.update_confidence()
        low = pattern.confidence
        pattern.frequency = 10
        pattern.update_confidence()
        assert low < pattern.confidence == pytest.approx(1.0)

    def test_significance(self):
        assert LearningPattern(DocumentType.EMAIL, "meet at the cafe", "meet at the coffee shop").is_significant_edit
        assert not LearningPattern(DocumentType.EMAIL, "send it to jon", "send it to Jon").is_significant_edit
        assert not LearningPattern(DocumentType.EMAIL, "", "anything").is_significant_edit


class TestInMemoryLearningStore:
    """Recording, lookup and replay."""

    def test_insignificant_edit_ignored(self):
        store = InMemoryLearningStore()
        assert store.record("send it to jon", "send it to Jon", DocumentType.MESSAGE) is None
        assert store.patterns == []

    def test_similar_edits_merge(self):
        store = InMemoryLearningStore()
        first = store.record("meet at the cafe", "meet at the coffee shop", DocumentType.MESSAGE)
        second = store.record("meet at the cafe", "meet at the coffee house", DocumentType.MESSAGE)

        assert second is first
        assert first.frequency == 2
        assert first.edited_text == "meet at the coffee house"
        assert first.is_trusted
        assert len(store.patterns) == 1

    def test_patterns_are_scoped_by_type(self):
        store = InMemoryLearningStore()
        store.record("meet at the cafe", "meet at the coffee shop", DocumentType.MESSAGE)

        assert store.apply_learned("the cafe is open", DocumentType.EMAIL) == "the cafe is open"
        assert store.apply_learned("the cafe is open", DocumentType.MESSAGE) == "the coffee is open"

    def test_replacement_is_whole_word_and_case_insensitive(self):
        store = InMemoryLearningStore()
        store.record("meet at the cafe", "meet at the coffee shop", DocumentType.MESSAGE)
        assert store.apply_learned("Cafe or cafeteria", DocumentType.MESSAGE) == "coffee or cafeteria"

    def test_find_similar_patterns(self):
        store = InMemoryLearningStore()
        store.record("meet at the cafe", "meet at the coffee shop", DocumentType.MESSAGE)

        assert len(store.find_similar_patterns("meet at the cafe!", DocumentType.MESSAGE)) == 1
        assert store.find_similar_patterns("something unrelated", DocumentType.MESSAGE) == []
        assert store.find_similar_patterns("meet at the cafe", DocumentType.EMAIL) == []

    def test_suspicious_replacements_skipped(self):
        store = InMemoryLearningStore()
        store.record("fix the typo", "fix the " + "x" * 60, DocumentType.DOCUMENT)
        assert store.apply_learned("the typo is here", DocumentType.DOCUMENT) == "the typo is here"

    def test_untrusted_patterns_ignored(self):
        store = InMemoryLearningStore()
        pattern = store.record("meet at the cafe", "meet at the coffee shop", DocumentType.MESSAGE)
        pattern.confidence = 0.5
        assert store.apply_learned("the cafe", DocumentType.MESSAGE) == "the cafe"
