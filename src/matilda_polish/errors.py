"""Exception hierarchy for the classification-and-rewrite pipeline."""

from __future__ import annotations


class PolishError(Exception):
    """Base class for all Matilda Polish errors."""


class ClassificationError(PolishError):
    """Raised when a transcript cannot be classified."""


class EmptyTextError(ClassificationError):
    def __init__(self, message: str = "Cannot classify empty or whitespace-only text"):
        super().__init__(message)


class ModelNotLoadedError(ClassificationError):
    def __init__(self, message: str = "Classification model failed to load", *, path: str | None = None):
        self.path = path
        super().__init__(message if path is None else f"{message}: {path}")


class ClassificationInferenceError(ClassificationError):
    def __init__(self, message: str = "Classification inference failed"):
        super().__init__(message)


class LearningApplyFailure(PolishError):
    """Raised by a learning store that could not apply its patterns."""


class CloudRewriteFailure(PolishError):
    """Raised when a cloud provider cannot rewrite the text."""

    def __init__(self, message: str, provider: str | None = None):
        self.provider = provider
        super().__init__(message)


class CloudTimeoutError(CloudRewriteFailure):
    pass


class CloudAPIError(CloudRewriteFailure):
    def __init__(self, status: int, message: str, provider: str | None = None):
        self.status = status
        super().__init__(f"HTTP {status}: {message}", provider=provider)


class CloudResponseError(CloudRewriteFailure):
    """The provider answered, but the body did not have the expected shape."""


class UnsupportedProviderError(PolishError):
    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"Unsupported cloud provider: '{provider}'")


__all__ = [
    "PolishError",
    "ClassificationError",
    "EmptyTextError",
    "ModelNotLoadedError",
    "ClassificationInferenceError",
    "LearningApplyFailure",
    "CloudRewriteFailure",
    "CloudTimeoutError",
    "CloudAPIError",
    "CloudResponseError",
    "UnsupportedProviderError",
]
