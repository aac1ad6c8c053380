"""Fire-and-forget recording of classification outcomes."""

from __future__ import annotations

import json
import threading
from datetime import datetime
from pathlib import Path
from queue import Queue
from typing import Protocol

from ..core.logging import setup_logging
from ..types import ClassificationResult, DocumentType, TextFeatures

logger = setup_logging(__name__)

_STOP = object()


class ClassificationSink(Protocol):
    def log(self, category: DocumentType, timestamp: datetime, full_text: str, features: TextFeatures) -> None:
        ...


class JsonlClassificationSink:
    """Appends one JSON object per classification to a file."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def log(self, category: DocumentType, timestamp: datetime, full_text: str, features: TextFeatures) -> None:
        if not full_text.strip():
            return
        record = {
            "category": category.value,
            "timestamp": timestamp.isoformat(),
            "text": full_text,
            "features": features.to_dict(),
        }
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(json.dumps(record) + "\n")


class BackgroundClassificationLogger:
    """Hands records to a sink on a daemon thread.

    ``submit`` never blocks and never raises; sink failures are logged and
    dropped by the worker.
    """

    def __init__(self, sink: ClassificationSink):
        self.sink = sink
        self._queue: Queue = Queue()
        self._thread: threading.Thread | None = None
        self._start_lock = threading.Lock()

    def _ensure_worker(self) -> None:
        with self._start_lock:
            if self._thread is None or not self._thread.is_alive():
                self._thread = threading.Thread(
                    target=self._run, name="classification-logger", daemon=True
                )
                self._thread.start()

    def submit(self, result: ClassificationResult, full_text: str, features: TextFeatures) -> None:
        try:
            self._ensure_worker()
            self._queue.put_nowait((result, full_text, features))
        except Exception as e:
            logger.warning(f"Could not queue classification record: {e}")

    def _run(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    return
                result, full_text, features = item
                self.sink.log(result.category, result.timestamp, full_text, features)
            except Exception as e:
                logger.warning(f"Classification logging failed: {e}")
            finally:
                self._queue.task_done()

    def flush(self) -> None:
        """Block until every queued record has been handled."""
        if self._thread is not None and self._thread.is_alive():
            self._queue.join()

    def close(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            self._queue.put(_STOP)
            self._thread.join(timeout=5.0)
        self._thread = None


__all__ = ["ClassificationSink", "JsonlClassificationSink", "BackgroundClassificationLogger"]
