"""Core question-answering logic for MediAssist."""

from mediassist.core.assistant import AssistantError, MedicalAssistant, Reply

__all__ = [
    "AssistantError",
    "MedicalAssistant",
    "Reply",
]
