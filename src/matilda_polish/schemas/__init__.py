from .responses import (
    BaseResponse,
    ClassificationResponse,
    EnhancementResponse,
    ErrorResponse,
    VoiceCommandResponse,
)

__all__ = [
    "BaseResponse",
    "ClassificationResponse",
    "EnhancementResponse",
    "ErrorResponse",
    "VoiceCommandResponse",
]
