"""Tests for document-type-specific formatting."""

from datetime import date

import pytest

from matilda_polish.enhancement.formatter import FormatApplier
from matilda_polish.types import DocumentType


@pytest.fixture
def formatter():
    return FormatApplier(today=lambda: date(2026, 10, 16))


class TestEmail:
    """Greeting, paragraphs and closing."""

    def test_greets_recipient_and_skips_closing_when_present(self, formatter):
        result = formatter.apply(
            "thanks for lunch yesterday. it was great to catch up", DocumentType.EMAIL, recipient="Sam"
        )
        assert result.text == "Hi Sam,\n\nThanks for lunch yesterday. It was great to catch up."
        assert "Added greeting" in result.changes
        assert "Added closing" not in result.changes

    def test_adds_closing_to_long_email(self, formatter):
        result = formatter.apply("please review the attached budget before friday", DocumentType.EMAIL)
        assert result.text == "Hi,\n\nPlease review the attached budget before friday.\n\nThanks"

    def test_existing_greeting_gets_capitalized_name(self, formatter):
        result = formatter.apply("hi sarah, the deck is ready", DocumentType.EMAIL)
        assert result.text == "Hi Sarah, the deck is ready."
        assert "Added greeting" not in result.changes

    def test_greeting_mid_sentence_is_not_a_name(self, formatter):
        result = formatter.apply("i wanted to say hi to the whole group today", DocumentType.EMAIL)
        assert result.text == "Hi,\n\nI wanted to say hi to the whole group today."
        assert "Capitalized names" not in result.changes

    def test_greeting_opening_a_sentence_capitalizes_name(self, formatter):
        result = formatter.apply("good news. hey maria, the offer came through", DocumentType.EMAIL)
        assert "Hey Maria, the offer came through." in result.text

    def test_function_word_after_greeting_is_not_a_name(self, formatter):
        assert formatter.apply("hello to everyone on the list", DocumentType.EMAIL).text.startswith(
            "Hello to everyone"
        )

    def test_closing_anywhere_in_text_prevents_another(self, formatter):
        text = (
            "thanks for the update yesterday. the numbers look good and the team is happy with the "
            "progress so far. we will review the remaining items next week before then"
        )
        result = formatter.apply(text, DocumentType.EMAIL)
        assert not result.text.endswith("Thanks")
        assert "Added closing" not in result.changes

    def test_groups_paragraphs(self, formatter):
        text = "the build is green. the tests pass. the docs are updated. we can ship today"
        result = formatter.apply(text, DocumentType.EMAIL)
        assert "The docs are updated.\n\nWe can ship today." in result.text
        assert "Organized into paragraphs" in result.changes


class TestMessage:
    """Short-form messages."""

    def test_recipient_greeting_and_question(self, formatter):
        result = formatter.apply("can you call me", DocumentType.MESSAGE, recipient="Sam")
        assert result.text == "Hi Sam, can you call me?"

    def test_question_starter(self, formatter):
        assert formatter.apply("what time is it", DocumentType.MESSAGE).text == "What time is it?"

    def test_statement(self, formatter):
        assert formatter.apply("running late", DocumentType.MESSAGE).text == "Running late."


class TestDocument:
    """Plain documents and the voice-command sub-formats."""

    def test_bullet_points(self, formatter):
        result = formatter.apply(
            "buy milk. call mom. fix the sink", DocumentType.DOCUMENT, metadata={"format": "bullet_points"}
        )
        assert result.text == "• Buy milk\n• Call mom\n• Fix the sink"

    def test_todo_list(self, formatter):
        result = formatter.apply("buy milk. call mom", DocumentType.DOCUMENT, metadata={"format": "todo_list"})
        assert result.text == "☐ Buy milk\n☐ Call mom"

    def test_memo_uses_injected_date(self, formatter):
        result = formatter.apply("the budget is approved", DocumentType.DOCUMENT, metadata={"format": "memo"})
        assert result.text == "MEMO\nDate: Oct 16, 2026\n\nThe budget is approved."

    def test_short_document_stays_one_paragraph(self, formatter):
        result = formatter.apply("first point. second point", DocumentType.DOCUMENT)
        assert result.text == "First point. Second point."


class TestSocial:
    """Length limits and idempotence."""

    def test_tweet_truncated_to_limit(self, formatter):
        text = " ".join(["word"] * 100)
        result = formatter.apply(text, DocumentType.SOCIAL, metadata={"format": "tweet", "limit": "280"})
        assert len(result.text) == 280
        assert result.text.endswith("...")

    def test_mid_length_post_truncated_to_forty_words(self, formatter):
        text = " ".join(["word"] * 50)
        result = formatter.apply(text, DocumentType.SOCIAL)
        assert result.text.endswith("...")
        assert len(result.text.split()) == 40

    def test_long_post_left_alone(self, formatter):
        text = " ".join(["word"] * 120)
        result = formatter.apply(text, DocumentType.SOCIAL)
        assert len(result.text.split()) == 120

    def test_short_post_is_idempotent(self, formatter):
        once = formatter.apply("launch day is here", DocumentType.SOCIAL).text
        twice = formatter.apply(once, DocumentType.SOCIAL).text
        assert once == twice == "Launch day is here."


class TestSearch:
    """Keyword queries."""

    @pytest.mark.parametrize("document_type", [DocumentType.SEARCH, DocumentType.SEARCH_QUERY])
    def test_strips_stop_words_and_punctuation(self, formatter, document_type):
        result = formatter.apply("What is the weather in Paris today?", document_type)
        assert result.text == "what weather paris today"

    def test_caps_word_count(self, formatter):
        text = " ".join(f"term{i}" for i in range(15))
        assert len(formatter.apply(text, DocumentType.SEARCH).text.split()) == 10


class TestGeneric:
    """Code and unknown fall back to capitalize + terminate."""

    @pytest.mark.parametrize("document_type", [DocumentType.CODE, DocumentType.UNKNOWN])
    def test_capitalize_and_terminate(self, formatter, document_type):
        assert formatter.apply("returns the user id", document_type).text == "Returns the user id."

    def test_blank_input_unchanged(self, formatter):
        result = formatter.apply("   ", DocumentType.EMAIL)
        assert result.text == "   "
        assert result.changes == []
