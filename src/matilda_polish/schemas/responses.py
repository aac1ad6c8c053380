from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from ..types import ClassificationResult, EnhancedText, VoiceCommandInstruction


class BaseResponse(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str
    success: bool = True


class ClassificationResponse(BaseResponse):
    type: str = "classification"
    category: str
    timestamp: str
    text_sample: str

    @classmethod
    def from_result(cls, result: ClassificationResult) -> ClassificationResponse:
        return cls(**result.to_dict())


class VoiceCommandResponse(BaseResponse):
    type: str = "voice_command"
    detected: bool
    prefix: str | None = None
    instruction: str | None = None
    content: str | None = None
    target_document_type: str | None = None
    recipient: str | None = None
    metadata: dict[str, str] | None = None

    @classmethod
    def from_instruction(cls, instruction: VoiceCommandInstruction | None) -> VoiceCommandResponse:
        if instruction is None:
            return cls(detected=False)
        return cls(detected=True, **instruction.to_dict())


class EnhancementResponse(BaseResponse):
    type: str = "enhancement"
    id: str
    original_text: str
    enhanced_text: str
    document_type: str
    applied_rules: list[str]
    learned_patterns_applied: int = 0
    cloud_enhanced: bool = False
    cloud_provider: str | None = None
    timestamp: str

    @classmethod
    def from_enhanced(cls, enhanced: EnhancedText) -> EnhancementResponse:
        return cls(**enhanced.to_dict())


class ErrorResponse(BaseResponse):
    type: str = "error"
    success: bool = False
    error: str
    details: dict[str, Any] | None = None
