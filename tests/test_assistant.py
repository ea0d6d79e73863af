"""Tests for the medical assistant orchestrator."""

import pytest
from unittest.mock import Mock, patch

from mediassist.core.assistant import AssistantError, MedicalAssistant, Reply
from mediassist.formatting.ir import Heading, Table
from mediassist.llm.client import LLMError


class TestMedicalAssistant:
    """Tests for the MedicalAssistant class."""

    def test_ask_returns_parsed_reply(self, mock_completion: Mock, sample_reply: str):
        """Test the reply text is parsed into a document."""
        reply = MedicalAssistant().ask("  Is Ginger Tea good for nausea?  ")

        assert isinstance(reply, Reply)
        assert reply.question == "Is Ginger Tea good for nausea?"
        assert reply.text == sample_reply
        assert any(isinstance(block, Table) for block in reply.document)
        assert isinstance(reply.document.blocks[1], Heading)

    def test_blank_question_rejected(self, mock_completion: Mock):
        """Test an empty question fails before any API call."""
        with pytest.raises(AssistantError, match="enter a question"):
            MedicalAssistant().ask("   ")

        mock_completion.assert_not_called()

    def test_missing_gemini_key(self, monkeypatch: pytest.MonkeyPatch):
        """Test a Gemini model without a key is rejected."""
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        monkeypatch.setattr("mediassist.config._settings", None)

        with pytest.raises(AssistantError, match="Gemini API Key"):
            MedicalAssistant().ask("question")

    def test_non_gemini_model_needs_no_gemini_key(
        self, monkeypatch: pytest.MonkeyPatch, mock_completion: Mock
    ):
        """Test other providers skip the Gemini key check."""
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
        monkeypatch.setattr("mediassist.config._settings", None)

        reply = MedicalAssistant(model="ollama/llama3").ask("question")

        assert len(reply.document) > 0

    def test_llm_error_wrapped(self):
        """Test client failures surface as AssistantError."""
        assistant = MedicalAssistant(validate=False)

        with patch.object(
            assistant.llm_client, "ask", side_effect=LLMError("API error: down")
        ):
            with pytest.raises(AssistantError, match="API error"):
                assistant.ask("question")

    def test_validate_flag_selects_client_method(self, mock_completion: Mock):
        """Test validation can be switched off."""
        assistant = MedicalAssistant(validate=False)

        with patch.object(assistant.llm_client, "ask", return_value="ok") as ask:
            reply = assistant.ask("question")

        ask.assert_called_once_with("question")
        assert reply.text == "ok"

    def test_parse_reply_without_network(self):
        """Test an already-fetched reply can be parsed directly."""
        reply = MedicalAssistant().parse_reply("q", "### Benefits\n* **Calm**")

        assert len(reply.document) == 2
