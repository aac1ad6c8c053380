"""Tests for prefix-triggered voice command parsing."""

import pytest

from matilda_polish.enhancement.patterns import INSTRUCTION_PATTERNS
from matilda_polish.enhancement.voice_commands import VoiceCommandParser
from matilda_polish.types import DocumentType


@pytest.fixture
def parser():
    return VoiceCommandParser()


class TestVoiceCommandParser:
    """Prefix + instruction detection."""

    def test_email_with_recipient(self, parser):
        instruction = parser.parse("BV, write an email to Sam. Thanks for everything")

        assert instruction is not None
        assert instruction.prefix == "BV"
        assert instruction.instruction == "write an email to"
        assert instruction.target_document_type == DocumentType.EMAIL
        assert instruction.recipient == "Sam"
        assert instruction.content == "Thanks for everything"
        assert instruction.metadata == {"format": "email"}

    def test_tweet_metadata(self, parser):
        instruction = parser.parse("BV, draft a tweet about our launch")

        assert instruction.target_document_type == DocumentType.SOCIAL
        assert instruction.content == "about our launch"
        assert instruction.recipient is None
        assert instruction.metadata == {"format": "tweet", "limit": "280"}

    def test_prefix_is_case_insensitive(self, parser):
        instruction = parser.parse("bv search for cheap flights")
        assert instruction.prefix == "BV"
        assert instruction.target_document_type == DocumentType.SEARCH
        assert instruction.content == "cheap flights"

    def test_multi_word_prefix_and_exclamation_terminator(self, parser):
        instruction = parser.parse("Better Voice text Alex! running late")
        assert instruction.prefix == "Better Voice"
        assert instruction.target_document_type == DocumentType.MESSAGE
        assert instruction.recipient == "Alex"
        assert instruction.content == "running late"

    def test_missing_terminator_keeps_all_content(self, parser):
        instruction = parser.parse("BV, email Sam")
        assert instruction.recipient is None
        assert instruction.content == "Sam"

    def test_no_prefix(self, parser):
        assert parser.parse("write an email to Sam. Thanks") is None

    def test_prefix_without_instruction(self, parser):
        assert parser.parse("BV, what time is it") is None

    def test_bare_prefix(self, parser):
        assert parser.parse("BV") is None

    def test_custom_prefixes(self):
        parser = VoiceCommandParser(prefixes=["Matilda"])
        assert parser.parse("BV, search for cats") is None
        assert parser.parse("Matilda, search for cats").content == "cats"


class TestInstructionTable:
    """Ordering of the instruction table."""

    def test_shorter_phrase_never_shadows_a_later_one(self):
        # For every pair i < j the earlier phrase must not be a prefix of the later one
        # unless both map to the same document type.
        phrases = [(p.phrase.lower(), p.document_type) for p in INSTRUCTION_PATTERNS]
        for i, (earlier, earlier_type) in enumerate(phrases):
            for later, later_type in phrases[i + 1:]:
                if later.startswith(earlier):
                    assert earlier_type == later_type

    def test_every_phrase_is_reachable_with_matching_type(self, parser):
        for pattern in INSTRUCTION_PATTERNS:
            instruction = parser.parse(f"BV, {pattern.phrase} Sam. hello")
            assert instruction is not None
            assert instruction.target_document_type == pattern.document_type
