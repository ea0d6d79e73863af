"""LLM integration for MediAssist."""

from mediassist.llm.client import LLMClient, LLMError, validate_reply
from mediassist.llm.prompts import (
    MEDICAL_ASSISTANT_SYSTEM_PROMPT,
    QUICK_PROMPTS,
    DISCLAIMER,
    FALLBACK_REPLY,
)

__all__ = [
    "LLMClient",
    "LLMError",
    "validate_reply",
    "MEDICAL_ASSISTANT_SYSTEM_PROMPT",
    "QUICK_PROMPTS",
    "DISCLAIMER",
    "FALLBACK_REPLY",
]
