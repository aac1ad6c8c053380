"""Core package exports."""

from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import ConfigLoader, EnhancementPreferences, get_config
    from .logging import get_logger, setup_logging

__all__ = ["ConfigLoader", "EnhancementPreferences", "get_config", "get_logger", "setup_logging"]

_LAZY_EXPORTS = {
    "ConfigLoader": (".config", "ConfigLoader"),
    "EnhancementPreferences": (".config", "EnhancementPreferences"),
    "get_config": (".config", "get_config"),
    "get_logger": (".logging", "get_logger"),
    "setup_logging": (".logging", "setup_logging"),
}


def __getattr__(name):
    if name not in _LAZY_EXPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attr_name = _LAZY_EXPORTS[name]
    module = import_module(module_name, __name__)
    value = getattr(module, attr_name)
    globals()[name] = value
    return value
