"""Hybrid document-type classification: statistical baseline plus rule voting."""

from __future__ import annotations

from ..core.logging import setup_logging
from ..errors import ClassificationInferenceError, EmptyTextError
from ..nlp.features import FeatureExtractor
from ..nlp.voter import DominantCharacteristicVoter
from ..types import ClassificationResult, DocumentType
from .logger import BackgroundClassificationLogger
from .model import ClassificationModelManager

logger = setup_logging(__name__)

TEXT_SAMPLE_LENGTH = 100
FALLBACK_CATEGORY = DocumentType.MESSAGE


class TextClassificationService:
    def __init__(
        self,
        model_manager: ClassificationModelManager,
        feature_extractor: FeatureExtractor | None = None,
        voter: DominantCharacteristicVoter | None = None,
        classification_logger: BackgroundClassificationLogger | None = None,
    ):
        self.model_manager = model_manager
        self.feature_extractor = feature_extractor or FeatureExtractor()
        self.voter = voter or DominantCharacteristicVoter()
        self.classification_logger = classification_logger

    def classify(self, text: str) -> ClassificationResult:
        """Classify ``text`` into one of the six known document types.

        Raises:
            EmptyTextError: If the text is empty after trimming.
            ModelNotLoadedError: If the statistical model cannot be loaded.
            ClassificationInferenceError: If the model yields no label.

        """
        trimmed = text.strip()
        if not trimmed:
            raise EmptyTextError()

        features = self.feature_extractor.extract(trimmed)
        baseline = self._baseline_category(trimmed)
        category = self.voter.analyze(trimmed, features, baseline)
        if category != baseline:
            logger.debug(f"Voter overrode model prediction {baseline.value} -> {category.value}")

        result = ClassificationResult(category=category, text_sample=trimmed[:TEXT_SAMPLE_LENGTH])
        if self.classification_logger is not None:
            self.classification_logger.submit(result, trimmed, features)
        return result

    def _baseline_category(self, text: str) -> DocumentType:
        model = self.model_manager.get_model()
        label = model.predict(text)
        if label is None:
            raise ClassificationInferenceError()

        category = DocumentType.from_label(label)
        if category is None:
            logger.warning(f"Unknown model label '{label}', falling back to {FALLBACK_CATEGORY.value}")
            return FALLBACK_CATEGORY
        return category


__all__ = ["TextClassificationService", "TEXT_SAMPLE_LENGTH"]
