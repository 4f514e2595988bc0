"""Pytest configuration and fixtures for testing."""

import os
import pytest
from unittest.mock import Mock, AsyncMock
from fastapi.testclient import TestClient

# Keep a developer's real key (from the shell or .env) out of the test run
os.environ["GEMINI_API_KEY"] = ""

from modules.config import AppConfig

TEST_API_KEY = "test_api_key_12345"
SAMPLE_TEXT = "all open bugs assigned to me updated this week"
SAMPLE_JQL = "project = BUG AND status = Open AND assignee = currentUser() AND updated >= -7d"


@pytest.fixture
def test_config():
    """Config with a fake Gemini key."""
    return AppConfig(gemini_api_key=TEST_API_KEY)


@pytest.fixture
def unconfigured_config():
    """Config with no Gemini key set."""
    return AppConfig(gemini_api_key=None)


@pytest.fixture
def mock_llm_client():
    """Mock text generator standing in for GeminiClient."""
    mock = Mock()
    # generate is async - use AsyncMock for assertion support
    mock.generate = AsyncMock(return_value=f"  {SAMPLE_JQL}\n")
    return mock


@pytest.fixture
def mock_genai_client():
    """Mock google genai client for testing."""
    mock = Mock()

    mock_response = Mock()
    mock_response.text = SAMPLE_JQL

    mock.aio.models.generate_content = AsyncMock(return_value=mock_response)
    return mock


@pytest.fixture
def test_client(test_config, mock_llm_client):
    """FastAPI test client with a configured key and a mocked generator."""
    # Import here so the environment above is in place first
    from main import create_app

    return TestClient(create_app(test_config, llm_client=mock_llm_client))


@pytest.fixture
def unconfigured_client(unconfigured_config, mock_llm_client):
    """FastAPI test client without an API key."""
    from main import create_app

    return TestClient(create_app(unconfigured_config, llm_client=mock_llm_client))
