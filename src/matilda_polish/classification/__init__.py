"""Document-type classification."""

from .logger import BackgroundClassificationLogger, ClassificationSink, JsonlClassificationSink
from .model import ClassificationModelManager, NaiveBayesTextModel, TextCategoryModel
from .service import TextClassificationService

__all__ = [
    "BackgroundClassificationLogger",
    "ClassificationSink",
    "JsonlClassificationSink",
    "ClassificationModelManager",
    "NaiveBayesTextModel",
    "TextCategoryModel",
    "TextClassificationService",
]
