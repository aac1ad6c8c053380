"""MATILDA POLISH - Classification-and-rewrite pipeline for raw transcripts."""

from importlib import metadata
from importlib import import_module
from pathlib import Path
import tomllib
from typing import TYPE_CHECKING


def _get_version() -> str:
    try:
        return metadata.version("goobits-matilda-polish")
    except Exception:
        pass

    try:
        pyproject_path = Path(__file__).resolve().parents[2] / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            data = tomllib.load(f)
        return str(data["project"]["version"])
    except Exception:
        return "unknown"


__version__ = _get_version()

if TYPE_CHECKING:
    from .classification import ClassificationModelManager, TextClassificationService
    from .context import PolishContext
    from .core.config import ConfigLoader, EnhancementPreferences, get_config
    from .enhancement import TextEnhancementPipeline, VoiceCommandParser
    from .types import DocumentType, EnhancedText, TextFeatures

_LAZY_EXPORTS = {
    "PolishContext": (".context", "PolishContext"),
    "ConfigLoader": (".core.config", "ConfigLoader"),
    "EnhancementPreferences": (".core.config", "EnhancementPreferences"),
    "get_config": (".core.config", "get_config"),
    "ClassificationModelManager": (".classification", "ClassificationModelManager"),
    "TextClassificationService": (".classification", "TextClassificationService"),
    "TextEnhancementPipeline": (".enhancement", "TextEnhancementPipeline"),
    "VoiceCommandParser": (".enhancement", "VoiceCommandParser"),
    "DocumentType": (".types", "DocumentType"),
    "EnhancedText": (".types", "EnhancedText"),
    "TextFeatures": (".types", "TextFeatures"),
}


def __getattr__(name):
    if name in {"classification", "cloud", "core", "enhancement", "learning", "nlp"}:
        module = import_module(f".{name}", __name__)
        globals()[name] = module
        return module

    if name not in _LAZY_EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attr_name = _LAZY_EXPORTS[name]
    module = import_module(module_name, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value


__all__ = [
    "PolishContext",
    "ConfigLoader",
    "EnhancementPreferences",
    "get_config",
    "ClassificationModelManager",
    "TextClassificationService",
    "TextEnhancementPipeline",
    "VoiceCommandParser",
    "DocumentType",
    "EnhancedText",
    "TextFeatures",
]
