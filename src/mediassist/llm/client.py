"""LLM client wrapper using LiteLLM for multi-provider support."""

import logging
import os
from typing import Optional

from litellm import completion
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from mediassist.config import get_settings
from mediassist.llm.prompts import FALLBACK_REPLY, get_reminder, get_system_prompt

logger = logging.getLogger(__name__)


class LLMError(Exception):
    """Error communicating with LLM provider."""

    pass


class LLMClient:
    """Unified LLM client using LiteLLM for provider-agnostic API calls."""

    def __init__(
        self,
        model: Optional[str] = None,
        api_base: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> None:
        """Initialize the LLM client.

        Args:
            model: LiteLLM model string (e.g., "gemini/gemini-2.5-flash")
            api_base: Optional API base URL (for local LLMs)
            temperature: Sampling temperature (lower = more deterministic)
            max_tokens: Maximum tokens in response
        """
        settings = get_settings()
        self.model = model or settings.default_model
        self.api_base = api_base
        self.temperature = (
            temperature if temperature is not None else settings.llm_temperature
        )
        self.max_tokens = max_tokens or settings.max_tokens
        self.max_retries = settings.max_retries

        self._setup_api_keys(settings)

    def _setup_api_keys(self, settings) -> None:
        """Ensure the Gemini key is available in environment for LiteLLM."""
        if settings.api_key:
            os.environ["GEMINI_API_KEY"] = settings.api_key

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((LLMError,)),
        reraise=True,
    )
    def _call_llm(self, text: str, system_prompt: str) -> str:
        """Make an LLM API call with retry logic."""
        logger.debug("Sending %d chars to %s", len(text), self.model)
        try:
            response = completion(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": text},
                ],
                api_base=self.api_base,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            message = str(e).lower()
            if "rate_limit" in message or "rate limit" in message:
                raise LLMError(f"Rate limited: {e}") from e
            elif "api" in message or "connection" in message:
                raise LLMError(f"API error: {e}") from e
            raise

        choices = response.choices or []
        content = choices[0].message.content if choices else None
        if not content:
            logger.warning("Model returned an empty reply, using fallback text")
            return FALLBACK_REPLY
        return content

    def ask(self, question: str) -> str:
        """Send a question with the medical assistant system prompt.

        Args:
            question: The user's question

        Returns:
            The raw markdown reply text
        """
        return self._call_llm(question, get_system_prompt())

    def ask_with_validation(self, question: str) -> str:
        """Ask, re-asking with a reminder while the reply breaks the format.

        Returns the last reply even if it never validates; the parser
        degrades gracefully on malformed markup.
        """
        result = self.ask(question)

        for _ in range(self.max_retries - 1):
            is_valid, issues = validate_reply(result)
            if is_valid:
                return result
            logger.info("Reply missing %s, retrying", ", ".join(issues))
            result = self._call_llm(question + get_reminder(issues), get_system_prompt())

        return result


def validate_reply(output: str) -> tuple[bool, list[str]]:
    """Check that a reply follows the formatting rules in the system prompt.

    Args:
        output: The model's reply text

    Returns:
        Tuple of (is_valid, list_of_issues)
    """
    issues: list[str] = []
    lines = [line.strip() for line in output.split("\n")]

    if not any(line.startswith("### ") for line in lines):
        issues.append("section headers ('###')")

    if "**" not in output:
        issues.append("bold keywords ('**bold**')")

    table_lines = sum(1 for line in lines if line.startswith("|"))
    if table_lines < 3:
        issues.append("usage instructions table")

    return len(issues) == 0, issues
