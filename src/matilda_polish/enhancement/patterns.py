#!/usr/bin/env python3
"""Ordered rule tables for the enhancement stages.

Every table here is a tuple on purpose: iteration order is part of the
behaviour. Each section states the ordering invariant it relies on.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ..types import DocumentType

# ==============================================================================
# SELF-CORRECTION
# ==============================================================================

# Re-sorted by descending length before every run; ties keep declared order.
CORRECTION_MARKERS: tuple[str, ...] = (
    "oh no",
    "oh wait",
    "no wait",
    "wait",
    "actually",
    "I mean",
    "sorry",
    "correction",
    "rather",
    "let me rephrase",
    "I meant to say",
    "no sorry",
    "that's wrong",
)

# Spaces are part of each phrase so only whole words match.
CLAUSE_BOUNDARIES: tuple[str, ...] = (
    " and ",
    " but ",
    " or ",
    " so ",
    " because ",
    " since ",
    " while ",
    " when ",
)

# Last ".!?" followed by whitespace and a capital letter
SENTENCE_BOUNDARY_PATTERN = re.compile(r"[.!?]\s+[A-Z]")


# ==============================================================================
# FILLER WORDS
# ==============================================================================

# Processed in declared order; later entries see text already cleaned by earlier ones.
FILLER_WORDS: tuple[str, ...] = (
    "um",
    "uh",
    "like",
    "you know",
    "I mean",
    "basically",
    "actually",
    "sort of",
    "kind of",
    "literally",
    "right",
    "okay",
    "so yeah",
    "you see",
    "well",
    "hmm",
    "err",
    "ah",
)

PROTECTED_FILLER_CONTEXTS: dict[str, tuple[str, ...]] = {
    "like": ("would like", "looks like", "seems like", "feels like", "tastes like"),
    "right": ("turn right", "on the right", "right now", "all right"),
    "so": ("and so", "or so", "if so"),
}

FILLER_CONTEXT_WINDOW = 20


# ==============================================================================
# VOICE COMMANDS
# ==============================================================================


@dataclass(frozen=True)
class InstructionPattern:
    phrase: str
    document_type: DocumentType
    extracts_recipient: bool = False
    metadata: dict[str, str] = field(default_factory=dict)


# First match wins. A phrase must come before any later phrase it is a prefix of.
DEFAULT_COMMAND_PREFIXES: tuple[str, ...] = ("BV", "Better Voice", "BetterVoice")

INSTRUCTION_PATTERNS: tuple[InstructionPattern, ...] = (
    # Email
    InstructionPattern("write an email to", DocumentType.EMAIL, True, {"format": "email"}),
    InstructionPattern("email", DocumentType.EMAIL, True, {"format": "email"}),
    InstructionPattern("compose an email to", DocumentType.EMAIL, True, {"format": "email"}),
    InstructionPattern("draft an email to", DocumentType.EMAIL, True, {"format": "email"}),
    # Messages
    InstructionPattern("send a text message to", DocumentType.MESSAGE, True, {"format": "text_message"}),
    InstructionPattern("text", DocumentType.MESSAGE, True, {"format": "text_message"}),
    InstructionPattern("message", DocumentType.MESSAGE, True, {"format": "text_message"}),
    InstructionPattern("send a slack message to", DocumentType.MESSAGE, True, {"format": "slack_message"}),
    InstructionPattern("slack", DocumentType.MESSAGE, True, {"format": "slack_message"}),
    # Documents
    InstructionPattern("write a memo about", DocumentType.DOCUMENT, False, {"format": "memo"}),
    InstructionPattern("create a memo about", DocumentType.DOCUMENT, False, {"format": "memo"}),
    InstructionPattern("write meeting notes", DocumentType.DOCUMENT, False, {"format": "meeting_notes"}),
    InstructionPattern("create meeting notes", DocumentType.DOCUMENT, False, {"format": "meeting_notes"}),
    InstructionPattern("write a formal letter to", DocumentType.DOCUMENT, True, {"format": "formal_letter"}),
    InstructionPattern("format as bullet points", DocumentType.DOCUMENT, False, {"format": "bullet_points"}),
    InstructionPattern("create a to-do list", DocumentType.DOCUMENT, False, {"format": "todo_list"}),
    InstructionPattern("write meeting minutes", DocumentType.DOCUMENT, False, {"format": "meeting_minutes"}),
    # Social
    InstructionPattern("draft a tweet", DocumentType.SOCIAL, False, {"format": "tweet", "limit": "280"}),
    InstructionPattern("write a tweet", DocumentType.SOCIAL, False, {"format": "tweet", "limit": "280"}),
    InstructionPattern("compose a linkedin post", DocumentType.SOCIAL, False, {"format": "linkedin"}),
    InstructionPattern("write a linkedin post", DocumentType.SOCIAL, False, {"format": "linkedin"}),
    InstructionPattern("update linkedin", DocumentType.SOCIAL, False, {"format": "linkedin"}),
    # Search
    InstructionPattern("search for", DocumentType.SEARCH, False, {"format": "search_query"}),
)

RECIPIENT_TERMINATOR_PATTERN = re.compile(r"[.!]")


# ==============================================================================
# FORMATTING
# ==============================================================================

GREETING_PREFIXES: tuple[str, ...] = (
    "hi", "hello", "hey", "dear", "good morning", "good afternoon", "good evening",
)

NAME_GREETING_PATTERN = re.compile(
    r"(^|[.!?]\s+|\n\s*)(hi|dear|hello|hey)\s+([a-z][\w'-]*)", re.IGNORECASE
)

# Words after a greeting that are not names
NON_NAME_WORDS = frozenset({
    "there", "everyone", "everybody", "all", "you", "guys", "folks", "team",
    "to", "the", "and", "a", "an", "for", "from", "of", "in", "on", "at", "with",
    "again", "back", "me", "us", "him", "her", "them", "my", "our", "your",
    "so", "but", "or", "is", "it", "this", "that",
})

CLOSING_PHRASES: tuple[str, ...] = ("thanks", "thank you", "regards", "sincerely", "best", "cheers")
CLOSING_PATTERN = re.compile(r"\b(" + "|".join(CLOSING_PHRASES) + r")\b", re.IGNORECASE)

MESSAGE_QUESTION_CUES: tuple[str, ...] = ("can you", "could you")
MESSAGE_QUESTION_STARTERS: tuple[str, ...] = ("what", "when", "where", "how")

SEARCH_STOP_WORDS = frozenset({"the", "a", "an", "is", "are", "was", "were", "to", "for", "of", "in", "on"})

SEARCH_MAX_WORDS = 10
EMAIL_CLOSING_MIN_LENGTH = 50
PARAGRAPH_SENTENCES = 3
DOCUMENT_PARAGRAPH_MIN_LENGTH = 200
LINKEDIN_MAX_WORDS = 150
SOCIAL_AUTO_MIN_WORDS = 40
SOCIAL_AUTO_MAX_WORDS = 100

__all__ = [
    "CORRECTION_MARKERS",
    "CLAUSE_BOUNDARIES",
    "SENTENCE_BOUNDARY_PATTERN",
    "FILLER_WORDS",
    "PROTECTED_FILLER_CONTEXTS",
    "FILLER_CONTEXT_WINDOW",
    "InstructionPattern",
    "DEFAULT_COMMAND_PREFIXES",
    "INSTRUCTION_PATTERNS",
    "RECIPIENT_TERMINATOR_PATTERN",
    "GREETING_PREFIXES",
    "NAME_GREETING_PATTERN",
    "NON_NAME_WORDS",
    "CLOSING_PHRASES",
    "CLOSING_PATTERN",
    "MESSAGE_QUESTION_CUES",
    "MESSAGE_QUESTION_STARTERS",
    "SEARCH_STOP_WORDS",
    "SEARCH_MAX_WORDS",
    "EMAIL_CLOSING_MIN_LENGTH",
    "PARAGRAPH_SENTENCES",
    "DOCUMENT_PARAGRAPH_MIN_LENGTH",
    "LINKEDIN_MAX_WORDS",
    "SOCIAL_AUTO_MIN_WORDS",
    "SOCIAL_AUTO_MAX_WORDS",
]
