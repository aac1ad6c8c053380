"""Statistical baseline classifier and its lazily loaded, shared cache.

Provides:
- TextCategoryModel: Capability interface for any label-predicting model
- NaiveBayesTextModel: Multinomial naive Bayes fitted from a JSON seed corpus
- ClassificationModelManager: Load-once, read-many holder for the model
"""

from __future__ import annotations

import json
import re
import threading
from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from pathlib import Path
from typing import Protocol, runtime_checkable

import numpy as np

from ..core.logging import setup_logging
from ..errors import ModelNotLoadedError

logger = setup_logging(__name__)

TOKEN_PATTERN = re.compile(r"[a-z0-9']+")


@runtime_checkable
class TextCategoryModel(Protocol):
    def predict(self, text: str) -> str:
        ...


def tokenize(text: str) -> list[str]:
    return TOKEN_PATTERN.findall(text.lower())


class NaiveBayesTextModel:
    """Multinomial naive Bayes over lower-cased word tokens.

    Log-likelihoods use add-``alpha`` smoothing. Tokens never seen during
    fitting are ignored; text without any known token gets the class with
    the highest prior.
    """

    def __init__(self, labels: Sequence[str], vocabulary: Mapping[str, int], log_priors, log_likelihoods):
        self.labels = list(labels)
        self.vocabulary = dict(vocabulary)
        self.log_priors = np.asarray(log_priors, dtype=np.float64)
        self.log_likelihoods = np.asarray(log_likelihoods, dtype=np.float64)

    @classmethod
    def fit(cls, corpus: Mapping[str, Sequence[str]], alpha: float = 1.0) -> NaiveBayesTextModel:
        labels = [label for label, examples in corpus.items() if examples]
        if not labels:
            raise ValueError("Seed corpus contains no labelled examples")

        vocabulary: dict[str, int] = {}
        for label in labels:
            for example in corpus[label]:
                for token in tokenize(example):
                    vocabulary.setdefault(token, len(vocabulary))

        counts = np.zeros((len(labels), len(vocabulary)), dtype=np.float64)
        doc_counts = np.zeros(len(labels), dtype=np.float64)
        for row, label in enumerate(labels):
            for example in corpus[label]:
                doc_counts[row] += 1
                for token in tokenize(example):
                    counts[row, vocabulary[token]] += 1

        log_priors = np.log(doc_counts / doc_counts.sum())
        smoothed = counts + alpha
        log_likelihoods = np.log(smoothed / smoothed.sum(axis=1, keepdims=True))
        return cls(labels, vocabulary, log_priors, log_likelihoods)

    @classmethod
    def from_file(cls, path: str | Path) -> NaiveBayesTextModel:
        """Fit a model from a ``{"labels": {label: [examples...]}}`` JSON file."""
        path = Path(path)
        if not path.is_file():
            raise ModelNotLoadedError(path=str(path))
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
            corpus = data["labels"]
            if not isinstance(corpus, dict):
                raise TypeError("'labels' must be an object")
            return cls.fit(corpus, alpha=float(data.get("alpha", 1.0)))
        except (OSError, ValueError, KeyError, TypeError) as e:
            logger.error(f"Could not parse classification model {path}: {e}")
            raise ModelNotLoadedError(path=str(path)) from e

    def predict(self, text: str) -> str:
        indices = [self.vocabulary[t] for t in tokenize(text) if t in self.vocabulary]
        scores = self.log_priors.copy()
        if indices:
            scores += self.log_likelihoods[:, indices].sum(axis=1)
        return self.labels[int(np.argmax(scores))]


class _ReadWriteLock:
    """Many concurrent readers or one writer."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False

    @contextmanager
    def read_locked(self) -> Iterator[None]:
        with self._cond:
            while self._writer:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._readers:
                self._cond.wait()
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class ClassificationModelManager:
    """Owns the cached model; the first caller loads it, everyone else reads."""

    def __init__(
        self,
        model_path: str | Path,
        loader: Callable[[Path], TextCategoryModel] = NaiveBayesTextModel.from_file,
    ):
        self.model_path = Path(model_path)
        self._loader = loader
        self._lock = _ReadWriteLock()
        self._model: TextCategoryModel | None = None

    @property
    def is_loaded(self) -> bool:
        with self._lock.read_locked():
            return self._model is not None

    def get_model(self) -> TextCategoryModel:
        with self._lock.read_locked():
            if self._model is not None:
                return self._model

        with self._lock.write_locked():
            # Another thread may have finished loading while we waited
            if self._model is None:
                logger.info(f"Loading classification model from {self.model_path}")
                try:
                    model = self._loader(self.model_path)
                except ModelNotLoadedError:
                    raise
                except Exception as e:
                    raise ModelNotLoadedError(path=str(self.model_path)) from e
                if model is None:
                    raise ModelNotLoadedError(path=str(self.model_path))
                self._model = model
            return self._model

    def reset(self) -> None:
        with self._lock.write_locked():
            self._model = None


__all__ = [
    "TextCategoryModel",
    "NaiveBayesTextModel",
    "ClassificationModelManager",
    "tokenize",
]
