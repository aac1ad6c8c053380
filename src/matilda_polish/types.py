"""Value types shared by the classifier and the rewrite pipeline.

Provides:
- DocumentType: Closed set of target writing contexts
- TextFeatures: Numeric/boolean signals derived from a transcript
- ClassificationResult: Outcome of a single classify call
- VoiceCommandInstruction: Explicit prefix-triggered formatting directive
- EnhancedText: Final record produced by one enhance call
"""

from __future__ import annotations

import uuid
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class DocumentType(str, Enum):
    """Target writing style/context."""

    EMAIL = "email"
    MESSAGE = "message"
    DOCUMENT = "document"
    SOCIAL = "social"
    CODE = "code"
    SEARCH = "search"
    SEARCH_QUERY = "searchQuery"
    UNKNOWN = "unknown"

    @property
    def is_search(self) -> bool:
        return self in (DocumentType.SEARCH, DocumentType.SEARCH_QUERY)

    @classmethod
    def from_label(cls, label: str | None) -> DocumentType | None:
        """Map a raw model label onto one of the six known categories."""
        if not label:
            return None
        normalized = label.strip().lower()
        for category in KNOWN_CATEGORIES:
            if category.value == normalized:
                return category
        return None

    @classmethod
    def parse(cls, value: str) -> DocumentType:
        """Case-insensitive lookup across every member, including searchQuery."""
        normalized = value.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member
        raise ValueError(f"Unknown document type: '{value}'")


KNOWN_CATEGORIES: tuple[DocumentType, ...] = (
    DocumentType.EMAIL,
    DocumentType.MESSAGE,
    DocumentType.DOCUMENT,
    DocumentType.SOCIAL,
    DocumentType.CODE,
    DocumentType.SEARCH,
)


def _clamp_unit(value: float) -> float:
    return min(max(float(value), 0.0), 1.0)


@dataclass(frozen=True)
class TextFeatures:
    """Signals extracted from a transcript.

    Numeric fields are coerced into range at construction and never rejected.
    """

    sentence_count: int = 1
    word_count: int = 0
    average_sentence_length: float = 0.0
    has_complete_sentences: bool = False
    formality_score: float = 0.0
    technical_term_count: int = 0
    punctuation_density: float = 0.0
    has_greeting: bool = False
    has_signature: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "sentence_count", max(1, int(self.sentence_count)))
        object.__setattr__(self, "word_count", max(0, int(self.word_count)))
        object.__setattr__(self, "average_sentence_length", max(0.0, float(self.average_sentence_length)))
        object.__setattr__(self, "technical_term_count", max(0, int(self.technical_term_count)))
        object.__setattr__(self, "formality_score", _clamp_unit(self.formality_score))
        object.__setattr__(self, "punctuation_density", _clamp_unit(self.punctuation_density))

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ClassificationResult:
    category: DocumentType
    text_sample: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        return {
            "category": self.category.value,
            "timestamp": self.timestamp.isoformat(),
            "text_sample": self.text_sample,
        }


@dataclass(frozen=True)
class VoiceCommandInstruction:
    """Directive parsed from a prefixed utterance such as "BV, draft a tweet"."""

    prefix: str
    instruction: str
    content: str
    target_document_type: DocumentType
    recipient: str | None = None
    metadata: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "prefix": self.prefix,
            "instruction": self.instruction,
            "content": self.content,
            "target_document_type": self.target_document_type.value,
            "recipient": self.recipient,
            "metadata": dict(self.metadata),
        }


@dataclass(frozen=True)
class EnhancedText:
    original_text: str
    enhanced_text: str
    document_type: DocumentType
    applied_rules: tuple[str, ...] = ()
    learned_patterns_applied: int = 0
    cloud_enhanced: bool = False
    cloud_provider: str | None = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "original_text": self.original_text,
            "enhanced_text": self.enhanced_text,
            "document_type": self.document_type.value,
            "applied_rules": list(self.applied_rules),
            "learned_patterns_applied": self.learned_patterns_applied,
            "cloud_enhanced": self.cloud_enhanced,
            "cloud_provider": self.cloud_provider,
            "timestamp": self.timestamp.isoformat(),
        }


__all__ = [
    "DocumentType",
    "KNOWN_CATEGORIES",
    "TextFeatures",
    "ClassificationResult",
    "VoiceCommandInstruction",
    "EnhancedText",
]
