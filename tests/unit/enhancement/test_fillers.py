"""Tests for context-aware filler removal."""

import pytest

from matilda_polish.enhancement.fillers import FillerRemover


@pytest.fixture
def remover():
    return FillerRemover()


class TestFillerRemover:
    """Fillers go, protected phrases stay."""

    def test_protected_like_is_kept(self, remover):
        result = remover.remove("I would like coffee")
        assert result.text == "I would like coffee"
        assert result.removed_fillers == []

    def test_leading_filler_removed(self, remover):
        result = remover.remove("um I would like coffee")
        assert result.text == "I would like coffee"
        assert result.removed_fillers == ["um"]

    def test_unprotected_like_removed_and_commas_collapsed(self, remover):
        assert remover.remove("I was, like, totally tired").text == "I was, totally tired"

    def test_protection_only_covers_the_phrase_itself(self, remover):
        result = remover.remove("It looks like rain, uh, today")
        assert result.text == "It looks like rain, today"
        assert result.removed_fillers == ["uh"]

    def test_turn_right_is_kept(self, remover):
        assert remover.remove("turn right at the light").text == "turn right at the light"

    def test_leading_comma_dropped(self, remover):
        assert remover.remove("right, let's go").text == "let's go"

    def test_removed_fillers_in_declared_then_document_order(self, remover):
        result = remover.remove("um uh um hello")
        assert result.text == "hello"
        assert result.removed_fillers == ["um", "um", "uh"]

    def test_case_insensitive(self, remover):
        assert remover.remove("Um, Basically it works").text == "it works"

    def test_filler_inside_word_is_kept(self, remover):
        assert remover.remove("the umbrella is wellmade").text == "the umbrella is wellmade"
