"""Shared fixtures for CLI tests."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

YESTERDAY_LINE = "Yesterday, all my troubles seemed so far away"


@pytest.fixture
def cli_runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_settings():
    """Mock Settings object with an API key."""
    from songvocab.config import Settings

    return Settings(
        _env_file=None,
        openai_api_key="sk-test-key-123456",
        default_level="B1",
        max_lyrics_length=15_000,
    )


@pytest.fixture
def unconfigured_settings():
    """Settings without an API key."""
    from songvocab.config import Settings

    return Settings(_env_file=None, openai_api_key="")


@pytest.fixture
def lyrics_file(tmp_path: Path) -> Path:
    """A one-line lyrics file."""
    path = tmp_path / "yesterday.txt"
    path.write_text(YESTERDAY_LINE + "\n", encoding="utf-8")
    return path


@pytest.fixture
def rare_lyrics_file(tmp_path: Path) -> Path:
    """Lyrics with several hard words."""
    path = tmp_path / "rare.txt"
    path.write_text("Relationship philosophy.\nMysterious jazz, jazz!\n", encoding="utf-8")
    return path


@pytest.fixture
def mock_client():
    """Mock OpenAIClient instance."""
    from unittest.mock import MagicMock

    from songvocab.llm.client import OpenAIClient

    client = MagicMock(spec=OpenAIClient)
    client.detect_language.return_value = "English"
    client.extract_candidates.return_value = []
    client.translate.side_effect = lambda terms, target, source="English": [
        {"troubles": "problemas", "relationship": "relación"}.get(term, "") for term in terms
    ]
    return client
