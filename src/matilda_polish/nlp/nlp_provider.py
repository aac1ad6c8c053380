"""Shared spaCy pipeline used for sentence and word boundaries."""

from __future__ import annotations

import threading

import spacy
from spacy.language import Language

from ..core.logging import get_logger

logger = get_logger(__name__)

_NLP: Language | None = None
_NLP_LOCK = threading.Lock()


def get_nlp() -> Language:
    """Return the process-wide tokenizer pipeline, building it on first use.

    A blank English pipeline with the rule-based sentencizer is enough for
    boundary detection and needs no downloaded model.
    """
    global _NLP
    if _NLP is not None:
        return _NLP
    with _NLP_LOCK:
        if _NLP is None:
            nlp = spacy.blank("en")
            nlp.add_pipe("sentencizer")
            logger.debug("Initialized blank spaCy pipeline with sentencizer")
            _NLP = nlp
    return _NLP


__all__ = ["get_nlp"]
