#!/usr/bin/env python3
"""Document-type-specific structural formatting."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import date

from ..core.logging import setup_logging
from ..types import DocumentType
from .patterns import (
    CLOSING_PATTERN,
    DOCUMENT_PARAGRAPH_MIN_LENGTH,
    EMAIL_CLOSING_MIN_LENGTH,
    GREETING_PREFIXES,
    LINKEDIN_MAX_WORDS,
    MESSAGE_QUESTION_CUES,
    MESSAGE_QUESTION_STARTERS,
    NAME_GREETING_PATTERN,
    NON_NAME_WORDS,
    PARAGRAPH_SENTENCES,
    SEARCH_MAX_WORDS,
    SEARCH_STOP_WORDS,
    SOCIAL_AUTO_MAX_WORDS,
    SOCIAL_AUTO_MIN_WORDS,
)
from .text_utils import (
    capitalize_first,
    ensure_terminal_punctuation,
    group_paragraphs,
    split_sentences,
    truncate_words,
    word_count,
)

logger = setup_logging(__name__)

ELLIPSIS = "..."


@dataclass
class FormatResult:
    text: str
    changes: list[str] = field(default_factory=list)


def _starts_with_any(text: str, prefixes: tuple[str, ...]) -> bool:
    lowered = text.lower()
    return any(lowered == p or lowered.startswith((p + " ", p + ",")) for p in prefixes)


class FormatApplier:
    """Rewrites text into the structure expected for a document type."""

    def __init__(self, today: Callable[[], date] = date.today):
        self._today = today
        self._handlers: dict[DocumentType, Callable[..., FormatResult]] = {
            DocumentType.EMAIL: self._format_email,
            DocumentType.MESSAGE: self._format_message,
            DocumentType.DOCUMENT: self._format_document,
            DocumentType.SOCIAL: self._format_social,
            DocumentType.CODE: self._format_code,
            DocumentType.UNKNOWN: self._format_generic,
        }

    def apply(
        self,
        text: str,
        document_type: DocumentType,
        recipient: str | None = None,
        metadata: Mapping[str, str] | None = None,
    ) -> FormatResult:
        if not text.strip():
            return FormatResult(text=text)
        if document_type.is_search:
            handler = self._format_search
        else:
            handler = self._handlers.get(document_type, self._format_generic)
        result = handler(text.strip(), recipient, dict(metadata or {}))
        if result.changes:
            logger.debug(f"Formatted as {document_type.value}: {', '.join(result.changes)}")
        return result

    # --------------------------------------------------------------------------
    # email
    # --------------------------------------------------------------------------

    def _format_email(self, text: str, recipient: str | None, metadata: dict[str, str]) -> FormatResult:
        changes = []
        formatted = capitalize_first(text)
        if formatted != text:
            changes.append("Capitalized first letter")

        named = self._capitalize_greeting_names(formatted)
        if named != formatted:
            changes.append("Capitalized names")
            formatted = named

        greeting = ""
        if not _starts_with_any(formatted, GREETING_PREFIXES):
            greeting = f"Hi {recipient},\n\n" if recipient else "Hi,\n\n"
            changes.append("Added greeting")

        sentences = [capitalize_first(ensure_terminal_punctuation(s)) for s in split_sentences(formatted)]
        body = group_paragraphs(sentences, PARAGRAPH_SENTENCES)
        if len(sentences) > PARAGRAPH_SENTENCES:
            changes.append("Organized into paragraphs")

        formatted = greeting + body
        if len(formatted) > EMAIL_CLOSING_MIN_LENGTH and not self._has_closing(formatted):
            formatted += "\n\nThanks"
            changes.append("Added closing")

        return FormatResult(formatted, changes)

    def _capitalize_greeting_names(self, text: str) -> str:
        def replace(match):
            lead, greeting, name = match.groups()
            if name.lower() in NON_NAME_WORDS:
                return match.group(0)
            return f"{lead}{greeting} {name[0].upper()}{name[1:]}"

        return NAME_GREETING_PATTERN.sub(replace, text)

    @staticmethod
    def _has_closing(text: str) -> bool:
        return CLOSING_PATTERN.search(text) is not None

    # --------------------------------------------------------------------------
    # message
    # --------------------------------------------------------------------------

    def _format_message(self, text: str, recipient: str | None, metadata: dict[str, str]) -> FormatResult:
        changes = []
        formatted = text
        if recipient and not _starts_with_any(text, GREETING_PREFIXES):
            formatted = f"Hi {recipient}, {text}"
            changes.append("Added greeting")

        capitalized = capitalize_first(formatted)
        if capitalized != formatted:
            changes.append("Capitalized first letter")
            formatted = capitalized

        if not formatted.endswith((".", "!", "?")):
            lowered = text.lower()
            is_question = any(cue in lowered for cue in MESSAGE_QUESTION_CUES) or lowered.startswith(
                MESSAGE_QUESTION_STARTERS
            )
            formatted += "?" if is_question else "."
            changes.append("Added punctuation")

        return FormatResult(formatted, changes)

    # --------------------------------------------------------------------------
    # document
    # --------------------------------------------------------------------------

    def _format_document(self, text: str, recipient: str | None, metadata: dict[str, str]) -> FormatResult:
        doc_format = metadata.get("format")
        if doc_format == "bullet_points":
            return FormatResult(self._as_list(text, "• "), ["Formatted as bullet points"])
        if doc_format == "todo_list":
            return FormatResult(self._as_list(text, "☐ "), ["Formatted as to-do list"])
        if doc_format == "memo":
            return FormatResult(self._as_memo(text), ["Formatted as memo"])

        changes = []
        sentences = [capitalize_first(ensure_terminal_punctuation(s)) for s in split_sentences(text)]
        if len(text) > DOCUMENT_PARAGRAPH_MIN_LENGTH:
            formatted = group_paragraphs(sentences, PARAGRAPH_SENTENCES)
            changes.append("Organized into paragraphs")
        else:
            formatted = " ".join(sentences)
        if formatted != text:
            changes.append("Capitalized sentences")
        return FormatResult(formatted, changes)

    def _as_list(self, text: str, marker: str) -> str:
        items = [ensure_terminal_punctuation(s).rstrip(".") for s in split_sentences(text)]
        return "\n".join(f"{marker}{capitalize_first(item)}" for item in items if item)

    def _as_memo(self, text: str) -> str:
        today = self._today()
        sentences = [capitalize_first(ensure_terminal_punctuation(s)) for s in split_sentences(text)]
        if len(text) > DOCUMENT_PARAGRAPH_MIN_LENGTH:
            content = group_paragraphs(sentences, PARAGRAPH_SENTENCES)
        else:
            content = " ".join(sentences)
        return f"MEMO\nDate: {today:%b} {today.day}, {today.year}\n\n{content}"

    # --------------------------------------------------------------------------
    # social
    # --------------------------------------------------------------------------

    def _format_social(self, text: str, recipient: str | None, metadata: dict[str, str]) -> FormatResult:
        changes = []
        formatted = capitalize_first(text)
        if formatted != text:
            changes.append("Capitalized first letter")

        social_format = metadata.get("format")
        if social_format == "tweet":
            limit = self._parse_limit(metadata.get("limit"))
            if limit is not None and len(formatted) > limit:
                formatted = formatted[: max(limit - len(ELLIPSIS), 0)] + ELLIPSIS
                changes.append(f"Truncated to {limit} characters")
        elif social_format == "linkedin":
            if word_count(formatted) > LINKEDIN_MAX_WORDS:
                formatted = truncate_words(formatted, LINKEDIN_MAX_WORDS) + ELLIPSIS
                changes.append(f"Truncated to {LINKEDIN_MAX_WORDS} words")
        elif SOCIAL_AUTO_MIN_WORDS < word_count(formatted) < SOCIAL_AUTO_MAX_WORDS:
            formatted = truncate_words(formatted, SOCIAL_AUTO_MIN_WORDS) + ELLIPSIS
            changes.append(f"Truncated to {SOCIAL_AUTO_MIN_WORDS} words")

        punctuated = ensure_terminal_punctuation(formatted)
        if punctuated != formatted:
            changes.append("Added punctuation")
        return FormatResult(punctuated, changes)

    @staticmethod
    def _parse_limit(value: str | None) -> int | None:
        try:
            return int(value) if value is not None else None
        except ValueError:
            logger.warning(f"Ignoring invalid character limit: {value!r}")
            return None

    # --------------------------------------------------------------------------
    # code / search / unknown
    # --------------------------------------------------------------------------

    def _format_code(self, text: str, recipient: str | None, metadata: dict[str, str]) -> FormatResult:
        return self._format_generic(text, recipient, metadata)

    def _format_search(self, text: str, recipient: str | None, metadata: dict[str, str]) -> FormatResult:
        words = [w for w in text.lower().split() if w not in SEARCH_STOP_WORDS]
        query = " ".join(words).translate(str.maketrans("", "", ".,!?"))
        formatted = truncate_words(query, SEARCH_MAX_WORDS)
        return FormatResult(formatted, ["Optimized for search"] if formatted != text else [])

    def _format_generic(self, text: str, recipient: str | None, metadata: dict[str, str]) -> FormatResult:
        changes = []
        formatted = capitalize_first(text)
        if formatted != text:
            changes.append("Capitalized first letter")
        punctuated = ensure_terminal_punctuation(formatted)
        if punctuated != formatted:
            changes.append("Added punctuation")
        return FormatResult(punctuated, changes)


__all__ = ["FormatApplier", "FormatResult"]
