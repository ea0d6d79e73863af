"""Pytest fixtures for MediAssist tests."""

import pytest
from pathlib import Path
from unittest.mock import Mock, patch


@pytest.fixture
def sample_reply() -> str:
    """Sample model reply following the system prompt's formatting rules."""
    return '''**Direct Answer**: Yes, ginger tea can ease mild nausea.

### Conditions Treated
* **Nausea**: Calms the stomach.
* **Indigestion**: Supports digestion.

### Usage Instructions
| Feature | Details |
| :--- | :--- |
| Best Time | Morning |
| Warning | **Drowsiness** is rare |

### Step-by-Step Process
1. Slice fresh ginger.
2. Steep for **10 minutes**.

Disclaimer: I am an AI. Consult a doctor before use.'''


@pytest.fixture(autouse=True)
def settings_env(monkeypatch: pytest.MonkeyPatch):
    """Give every test a fresh settings object with a fake Gemini key."""
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.delenv("MEDIASSIST_MODEL", raising=False)
    monkeypatch.setattr("mediassist.config._settings", None)
    yield
    monkeypatch.setattr("mediassist.config._settings", None)


@pytest.fixture
def mock_completion(sample_reply: str):
    """Patch litellm completion so no API calls are made."""
    with patch("mediassist.llm.client.completion") as mock:
        mock.return_value = Mock(
            choices=[Mock(message=Mock(content=sample_reply))]
        )
        yield mock


@pytest.fixture
def reply_file(tmp_path: Path, sample_reply: str) -> Path:
    """Create a saved reply file for testing."""
    file_path = tmp_path / "reply.md"
    file_path.write_text(sample_reply, encoding="utf-8")
    return file_path
