"""Question-answering orchestrator for MediAssist."""

import logging
from dataclasses import dataclass
from typing import Optional

from mediassist.config import get_settings
from mediassist.formatting.ir import Document
from mediassist.formatting.parser import MarkdownParser
from mediassist.llm.client import LLMClient, LLMError

logger = logging.getLogger(__name__)


class AssistantError(Exception):
    """Error answering a question."""

    pass


@dataclass(frozen=True)
class Reply:
    """A question together with the model's raw and parsed answer."""

    question: str
    text: str
    document: Document


class MedicalAssistant:
    """Orchestrates the question pipeline.

    Pipeline:
    1. Validate the question and credentials
    2. Ask the model with the formatting system prompt
    3. Parse the markdown reply into a Document
    """

    def __init__(
        self,
        model: Optional[str] = None,
        api_base: Optional[str] = None,
        validate: bool = True,
    ) -> None:
        """Initialize the assistant.

        Args:
            model: LiteLLM model string
            api_base: Optional API base URL for local LLMs
            validate: Whether to re-ask when the reply breaks the format
        """
        settings = get_settings()
        self.model = model or settings.default_model
        self.validate = validate

        self.llm_client = LLMClient(model=self.model, api_base=api_base)
        self.parser = MarkdownParser()

    def ask(self, question: str) -> Reply:
        """Answer a question.

        Raises:
            AssistantError: If the question is blank, the key is missing,
                or the model cannot be reached
        """
        question = question.strip()
        if not question:
            raise AssistantError("Please enter a question.")

        if self.model.startswith("gemini/") and not get_settings().api_key:
            raise AssistantError(
                "Please enter your Gemini API Key in settings first."
            )

        try:
            if self.validate:
                text = self.llm_client.ask_with_validation(question)
            else:
                text = self.llm_client.ask(question)
        except LLMError as e:
            raise AssistantError(str(e)) from e

        return self.parse_reply(question, text)

    def parse_reply(self, question: str, text: str) -> Reply:
        """Parse an already-fetched reply text."""
        document = self.parser.parse(text)
        logger.debug("Reply to %r parsed into %d block(s)", question, len(document))
        return Reply(question=question, text=text, document=document)
