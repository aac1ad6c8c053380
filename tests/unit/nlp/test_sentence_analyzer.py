"""Tests for sentence type detection and per-sentence punctuation."""

import pytest

from matilda_polish.nlp.sentence_analyzer import SentenceAnalyzer, SentenceType
from matilda_polish.types import DocumentType


@pytest.fixture
def analyzer():
    return SentenceAnalyzer()


class TestDetectType:
    """Ordered detection rules."""

    @pytest.mark.parametrize("sentence", [
        "what time is it",
        "can you send it",
        "so do you want to go",
        "it's cold isn't it",
        "tell me what is wrong",
    ])
    def test_questions(self, analyzer, sentence):
        assert analyzer.detect_type(sentence) == SentenceType.QUESTION

    def test_command(self, analyzer):
        assert analyzer.detect_type("send the report to Sam") == SentenceType.COMMAND

    def test_single_command_verb_is_statement(self, analyzer):
        assert analyzer.detect_type("stop") == SentenceType.STATEMENT

    def test_exclamation(self, analyzer):
        assert analyzer.detect_type("that is amazing") == SentenceType.EXCLAMATION

    def test_statement(self, analyzer):
        assert analyzer.detect_type("the build is green") == SentenceType.STATEMENT

    def test_empty_is_statement(self, analyzer):
        assert analyzer.detect_type("") == SentenceType.STATEMENT


class TestEnhance:
    """Punctuation and capitalization over whole texts."""

    def test_each_sentence_gets_its_own_terminator(self, analyzer):
        result = analyzer.enhance("It works. What can we do about that.")
        assert result == "It works. What can we do about that?"

    def test_command_gets_period(self, analyzer):
        assert analyzer.enhance("send the report to Sam") == "Send the report to Sam."

    def test_standalone_i_is_capitalized(self, analyzer):
        assert analyzer.enhance("i think i can") == "I think I can."

    def test_standalone_i_kept_for_code(self, analyzer):
        result = analyzer.enhance("loop while i is small", document_type=DocumentType.CODE)
        assert result == "Loop while i is small."

    def test_decimal_numbers_are_not_sentence_breaks(self, analyzer):
        assert analyzer.enhance("version 2.5 is out") == "Version 2.5 is out."

    def test_trailing_punctuation_is_replaced(self, analyzer):
        assert analyzer.enhance("is it ready,") == "Is it ready?"

    def test_capitalize_only(self, analyzer):
        result = analyzer.enhance("hello there. see you", auto_punctuate=False)
        assert result == "Hello there. See you"

    def test_punctuate_only(self, analyzer):
        result = analyzer.enhance("is it ready", auto_capitalize=False)
        assert result == "is it ready?"

    def test_nothing_enabled_returns_input(self, analyzer):
        text = "leave me alone"
        assert analyzer.enhance(text, auto_punctuate=False, auto_capitalize=False) == text

    def test_split_drops_empty_pieces(self, analyzer):
        assert analyzer.split("One. Two!! Three?") == ["One", "Two", "Three"]
