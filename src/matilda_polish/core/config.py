#!/usr/bin/env python3
"""Configuration loader and read-only preference surface."""
from __future__ import annotations

import copy
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomllib

DEFAULT_CONFIG: dict[str, Any] = {
    "enhancement": {
        "detect_voice_commands": True,
        "remove_filler_words": True,
        "remove_self_corrections": True,
        "auto_punctuate": True,
        "auto_capitalize": True,
        "apply_formatting": True,
        "apply_learning_patterns": True,
    },
    "classification": {
        # Empty means the seed corpus bundled with the package
        "model_path": "",
        "log_enabled": True,
        "log_path": "~/.matilda/classifications.jsonl",
    },
    "voice_commands": {"prefixes": ["BV", "Better Voice", "BetterVoice"]},
    "learning": {"similarity_threshold": 0.8},
    "cloud": {
        "enabled": False,
        "provider": "claude",
        "api_key": "",
        "timeout_s": 30.0,
        "enhance": {
            "email": True,
            "message": True,
            "document": True,
            "social": True,
            "code": False,
        },
        "claude": {
            "model": "claude-3-5-sonnet-20241022",
            "endpoint": "https://api.anthropic.com/v1/messages",
        },
        "openai": {
            "model": "gpt-4",
            "endpoint": "https://api.openai.com/v1/chat/completions",
        },
        "prompts": {},
    },
}

_PROVIDER_KEY_ENV = {"claude": "ANTHROPIC_API_KEY", "openai": "OPENAI_API_KEY"}


class ConfigLoader:
    """Load configuration from config files."""

    def __init__(self, config_path: str | Path | None = None) -> None:
        if config_path is None:
            config_path = self._default_config_path()

        self.config_file = str(config_path)
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path, "rb") as f:
                full_config = tomllib.load(f)
            polish_config = full_config.get("polish", {})
        else:
            polish_config = {}

        self._config = self._merge_dicts(copy.deepcopy(DEFAULT_CONFIG), polish_config)

        env_provider = os.environ.get("MATILDA_POLISH_PROVIDER")
        if env_provider:
            self._config["cloud"]["provider"] = env_provider

        env_model = os.environ.get("MATILDA_POLISH_MODEL")
        if env_model:
            self._config["classification"]["model_path"] = env_model

    def _default_config_path(self) -> Path:
        env_path = os.environ.get("MATILDA_CONFIG")
        if env_path:
            return Path(env_path)
        return Path.home() / ".matilda" / "config.toml"

    def _merge_dicts(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        merged = base.copy()
        for key, value in override.items():
            if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
                merged[key] = self._merge_dicts(merged[key], value)
            else:
                merged[key] = value
        return merged

    def get(self, key_path: str, default: Any = None) -> Any:
        """Get a value using dot notation (e.g., 'cloud.enhance.email')"""
        keys = key_path.split(".")
        value = self._config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    @property
    def model_path(self) -> Path:
        configured = str(self.get("classification.model_path", "") or "")
        if configured:
            return Path(configured).expanduser()
        return Path(__file__).resolve().parents[1] / "classification" / "resources" / "seed_corpus.json"

    @property
    def classification_log_enabled(self) -> bool:
        return bool(self.get("classification.log_enabled", True))

    @property
    def classification_log_path(self) -> Path:
        return Path(str(self.get("classification.log_path", "~/.matilda/classifications.jsonl"))).expanduser()

    @property
    def voice_command_prefixes(self) -> list[str]:
        return [str(p) for p in self.get("voice_commands.prefixes", [])]

    @property
    def learning_similarity_threshold(self) -> float:
        return float(self.get("learning.similarity_threshold", 0.8))

    @property
    def cloud_provider(self) -> str:
        return str(self.get("cloud.provider", "claude")).lower()

    @property
    def cloud_api_key(self) -> str:
        """Resolve the cloud API key.

        Priority order:
        1. MATILDA_POLISH_API_KEY
        2. Provider-specific variable (ANTHROPIC_API_KEY / OPENAI_API_KEY)
        3. Config file value
        """
        env_key = os.environ.get("MATILDA_POLISH_API_KEY")
        if env_key:
            return env_key

        provider_env = _PROVIDER_KEY_ENV.get(self.cloud_provider)
        if provider_env and os.environ.get(provider_env):
            return os.environ[provider_env]

        return str(self.get("cloud.api_key", "") or "")

    @property
    def cloud_timeout_s(self) -> float:
        return float(self.get("cloud.timeout_s", 30.0))

    def provider_options(self, provider: str) -> dict[str, Any]:
        options = self.get(f"cloud.{provider.lower()}", {})
        return dict(options) if isinstance(options, dict) else {}

    @property
    def cloud_prompts(self) -> dict[str, str]:
        prompts = self.get("cloud.prompts", {})
        return {str(k): str(v) for k, v in prompts.items()} if isinstance(prompts, dict) else {}


@dataclass(frozen=True)
class EnhancementPreferences:
    """Switches the pipeline reads; never written by the core."""

    detect_voice_commands: bool = True
    remove_filler_words: bool = True
    remove_self_corrections: bool = True
    auto_punctuate: bool = True
    auto_capitalize: bool = True
    apply_formatting: bool = True
    apply_learning_patterns: bool = True
    cloud_enabled: bool = False
    cloud_provider: str = "claude"
    cloud_api_key: str = ""
    cloud_timeout_s: float = 30.0
    cloud_per_type: dict[str, bool] = field(
        default_factory=lambda: dict(DEFAULT_CONFIG["cloud"]["enhance"])
    )

    @classmethod
    def from_config(cls, config: ConfigLoader) -> "EnhancementPreferences":
        per_type = config.get("cloud.enhance", {})
        return cls(
            detect_voice_commands=bool(config.get("enhancement.detect_voice_commands", True)),
            remove_filler_words=bool(config.get("enhancement.remove_filler_words", True)),
            remove_self_corrections=bool(config.get("enhancement.remove_self_corrections", True)),
            auto_punctuate=bool(config.get("enhancement.auto_punctuate", True)),
            auto_capitalize=bool(config.get("enhancement.auto_capitalize", True)),
            apply_formatting=bool(config.get("enhancement.apply_formatting", True)),
            apply_learning_patterns=bool(config.get("enhancement.apply_learning_patterns", True)),
            cloud_enabled=bool(config.get("cloud.enabled", False)),
            cloud_provider=config.cloud_provider,
            cloud_api_key=config.cloud_api_key,
            cloud_timeout_s=config.cloud_timeout_s,
            cloud_per_type={str(k): bool(v) for k, v in per_type.items()} if isinstance(per_type, dict) else {},
        )

    @property
    def has_api_key(self) -> bool:
        return bool(self.cloud_api_key.strip())

    def cloud_enabled_for(self, document_type: Any) -> bool:
        """Per-type cloud switch; search variants and unknown are never sent."""
        key = getattr(document_type, "value", document_type)
        if key in ("search", "searchQuery", "unknown"):
            return False
        return bool(self.cloud_per_type.get(key, False))


# Global singleton instance, used by the CLI only
_config_loader: ConfigLoader | None = None


def get_config() -> ConfigLoader:
    """Get the global config loader instance"""
    global _config_loader
    if _config_loader is None:
        _config_loader = ConfigLoader()
    return _config_loader


__all__ = ["DEFAULT_CONFIG", "ConfigLoader", "EnhancementPreferences", "get_config"]
