"""Tests for background classification logging."""

import json
from unittest.mock import Mock, patch

from matilda_polish.classification.logger import BackgroundClassificationLogger, JsonlClassificationSink
from matilda_polish.types import ClassificationResult, DocumentType


class TestBackgroundClassificationLogger:
    """Records reach the sink off the caller's thread."""

    def test_records_delivered_after_flush(self, neutral_features):
        sink = Mock()
        background = BackgroundClassificationLogger(sink)
        result = ClassificationResult(DocumentType.EMAIL, "Hi Sam")

        background.submit(result, "Hi Sam, full text", neutral_features)
        background.flush()

        sink.log.assert_called_once_with(DocumentType.EMAIL, result.timestamp, "Hi Sam, full text", neutral_features)
        background.close()

    def test_sink_errors_are_swallowed(self, neutral_features):
        sink = Mock()
        sink.log.side_effect = [OSError("disk full"), None]
        background = BackgroundClassificationLogger(sink)
        result = ClassificationResult(DocumentType.MESSAGE, "hey")

        with patch("matilda_polish.classification.logger.logger") as mock_logger:
            background.submit(result, "hey", neutral_features)
            background.submit(result, "hey again", neutral_features)
            background.flush()

        assert sink.log.call_count == 2
        mock_logger.warning.assert_called_once()
        background.close()

    def test_flush_and_close_without_records(self):
        background = BackgroundClassificationLogger(Mock())
        background.flush()
        background.close()


class TestJsonlClassificationSink:
    """One JSON object per line."""

    def test_appends_records(self, tmp_path, neutral_features):
        path = tmp_path / "nested" / "classifications.jsonl"
        sink = JsonlClassificationSink(path)
        result = ClassificationResult(DocumentType.SEARCH, "weather")

        sink.log(result.category, result.timestamp, "weather tomorrow", neutral_features)
        sink.log(result.category, result.timestamp, "flights", neutral_features)

        lines = path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        record = json.loads(lines[0])
        assert record["category"] == "search"
        assert record["text"] == "weather tomorrow"
        assert record["timestamp"] == result.timestamp.isoformat()
        assert record["features"]["word_count"] == neutral_features.word_count

    def test_empty_text_is_skipped(self, tmp_path, neutral_features):
        path = tmp_path / "classifications.jsonl"
        result = ClassificationResult(DocumentType.SEARCH, "")
        JsonlClassificationSink(path).log(result.category, result.timestamp, "  ", neutral_features)
        assert not path.exists()
