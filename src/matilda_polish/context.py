"""Composition root: one object owning every long-lived collaborator."""

from __future__ import annotations

from dataclasses import dataclass

from .classification.logger import BackgroundClassificationLogger, JsonlClassificationSink
from .classification.model import ClassificationModelManager
from .classification.service import TextClassificationService
from .core.config import ConfigLoader, EnhancementPreferences
from .core.logging import setup_logging
from .enhancement.pipeline import TextEnhancementPipeline
from .enhancement.voice_commands import VoiceCommandParser
from .learning.store import InMemoryLearningStore, LearningPatternStore

logger = setup_logging(__name__)


@dataclass
class PolishContext:
    preferences: EnhancementPreferences
    model_manager: ClassificationModelManager
    classifier: TextClassificationService
    learning_store: LearningPatternStore
    pipeline: TextEnhancementPipeline
    classification_logger: BackgroundClassificationLogger | None = None

    @classmethod
    def from_config(cls, config: ConfigLoader | None = None) -> PolishContext:
        config = config or ConfigLoader()
        preferences = EnhancementPreferences.from_config(config)

        model_manager = ClassificationModelManager(config.model_path)
        classification_logger = None
        if config.classification_log_enabled:
            classification_logger = BackgroundClassificationLogger(
                JsonlClassificationSink(config.classification_log_path)
            )
        classifier = TextClassificationService(model_manager, classification_logger=classification_logger)
        learning_store = InMemoryLearningStore()

        pipeline = TextEnhancementPipeline(
            preferences=preferences,
            classifier=classifier,
            learning_store=learning_store,
            voice_parser=VoiceCommandParser(prefixes=config.voice_command_prefixes),
            provider_options=config.provider_options(preferences.cloud_provider),
            prompt_overrides=config.cloud_prompts,
        )
        logger.debug(f"Polish context built from {config.config_file}")
        return cls(
            preferences=preferences,
            model_manager=model_manager,
            classifier=classifier,
            learning_store=learning_store,
            pipeline=pipeline,
            classification_logger=classification_logger,
        )

    def close(self) -> None:
        if self.classification_logger is not None:
            self.classification_logger.flush()
            self.classification_logger.close()


__all__ = ["PolishContext"]
