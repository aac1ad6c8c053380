"""Tests for the composition root."""

import json

import pytest

from matilda_polish.context import PolishContext
from matilda_polish.core.config import ConfigLoader
from matilda_polish.types import DocumentType


@pytest.fixture
def context(config_file, tmp_path):
    log_path = tmp_path / "classifications.jsonl"
    path = config_file(f'[polish.classification]\nlog_path = "{log_path.as_posix()}"\n')
    ctx = PolishContext.from_config(ConfigLoader(path))
    yield ctx
    ctx.close()


class TestPolishContext:
    """Wiring from configuration to a working pipeline."""

    def test_classifier_shares_model_manager(self, context):
        assert context.classifier.model_manager is context.model_manager
        assert context.pipeline.classifier is context.classifier
        assert context.pipeline.learning_store is context.learning_store

    def test_classification_is_logged(self, context, tmp_path):
        result = context.classifier.classify("weather tomorrow")
        context.classification_logger.flush()

        record = json.loads((tmp_path / "classifications.jsonl").read_text(encoding="utf-8").splitlines()[0])
        assert record["category"] == result.category.value
        assert record["text"] == "weather tomorrow"

    @pytest.mark.asyncio
    async def test_auto_detected_enhancement(self, context):
        result = await context.pipeline.enhance("weather tomorrow")
        assert result.document_type == DocumentType.SEARCH
        assert result.applied_rules[0] == "classify"
        assert result.enhanced_text == "weather tomorrow"

    def test_logging_can_be_disabled(self, config_file):
        path = config_file("[polish.classification]\nlog_enabled = false\n")
        ctx = PolishContext.from_config(ConfigLoader(path))
        assert ctx.classification_logger is None
        assert ctx.classifier.classification_logger is None
        ctx.close()
