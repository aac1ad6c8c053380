"""Staged rewriting of transcripts into polished text."""

from .fillers import FillerRemovalResult, FillerRemover
from .formatter import FormatApplier, FormatResult
from .pipeline import TextEnhancementPipeline, normalize_text
from .self_correction import SelfCorrectionExcisor
from .voice_commands import VoiceCommandParser

__all__ = [
    "FillerRemovalResult",
    "FillerRemover",
    "FormatApplier",
    "FormatResult",
    "TextEnhancementPipeline",
    "normalize_text",
    "SelfCorrectionExcisor",
    "VoiceCommandParser",
]
