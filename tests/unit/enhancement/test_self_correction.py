"""Tests for self-correction excision."""

import pytest

from matilda_polish.enhancement.self_correction import SelfCorrectionExcisor


@pytest.fixture
def excisor():
    return SelfCorrectionExcisor()


class TestProcess:
    """Retracted clauses are dropped at the nearest boundary."""

    def test_cuts_back_to_comma(self, excisor):
        result = excisor.process("Let's meet at 3, oh no, make it 4")
        assert result == "Let's meet at 3, make it 4"
        assert "oh no" not in result

    def test_longer_marker_wins_over_its_suffix(self, excisor):
        # "oh wait" must be handled before "wait", otherwise "oh" would survive
        assert excisor.process("Call Bob, oh wait, call Alice") == "Call Bob, call Alice"

    def test_marker_at_start_keeps_correction_only(self, excisor):
        assert excisor.process("actually I want tea") == "I want tea"

    def test_marker_inside_a_word_is_ignored(self, excisor):
        text = "The waiter brought the bill"
        assert excisor.process(text) == text

    def test_marker_after_complete_sentence_keeps_it(self, excisor):
        result = excisor.process("Send it to John. Actually, send it to Mary")
        assert result == "Send it to John. send it to Mary"

    def test_cuts_at_last_sentence_boundary(self, excisor):
        result = excisor.process("Book the room. We need it Monday sorry Tuesday")
        assert result == "Book the room. Tuesday"

    def test_no_markers(self, excisor):
        text = "Ship the release on Friday"
        assert excisor.process(text) == text


class TestAnalyzeCorrections:
    """Marker discovery for diagnostics."""

    def test_positions_in_document_order(self, excisor):
        found = excisor.analyze_corrections("wait, actually I mean it")
        assert found == [("wait", 0), ("actually", 6), ("I mean", 15)]

    def test_none_found(self, excisor):
        assert excisor.analyze_corrections("all good here") == []
