"""
Pytest configuration shared by all polish tests.

Routes file logging into a throwaway directory and provides common fixtures.
"""

import os
import tempfile

# Must be set before any matilda_polish module calls setup_logging()
os.environ.setdefault("MATILDA_LOG_DIR", tempfile.mkdtemp(prefix="matilda-polish-logs-"))
os.environ.pop("MATILDA_POLISH_CONSOLE_LOGS", None)

import pytest

from matilda_polish.types import TextFeatures


_CLOUD_ENV_VARS = (
    "MATILDA_POLISH_API_KEY",
    "ANTHROPIC_API_KEY",
    "OPENAI_API_KEY",
    "MATILDA_POLISH_PROVIDER",
    "MATILDA_POLISH_MODEL",
    "MATILDA_CONFIG",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer credentials and overrides out of every test."""
    for name in _CLOUD_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def neutral_features():
    """Features for which no voting rule fires."""
    return TextFeatures(
        sentence_count=3,
        word_count=60,
        average_sentence_length=10.0,
        has_complete_sentences=True,
        formality_score=0.5,
        technical_term_count=0,
        punctuation_density=0.1,
    )


@pytest.fixture
def email_features():
    return TextFeatures(
        sentence_count=3,
        word_count=50,
        average_sentence_length=16.0,
        has_complete_sentences=True,
        formality_score=0.65,
        punctuation_density=0.1,
        has_greeting=True,
        has_signature=True,
    )


@pytest.fixture
def config_file(tmp_path):
    """Write a [polish] TOML file and return its path."""

    def _write(body: str):
        path = tmp_path / "config.toml"
        path.write_text(body, encoding="utf-8")
        return path

    return _write
