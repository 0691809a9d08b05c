import os

# Config reads the environment at import time
os.environ.setdefault("OPENAI_API_KEY", "test-openai-key")

import pytest
from unittest.mock import AsyncMock, MagicMock

from tests.fixtures.responses import make_completion


@pytest.fixture
def mock_openai_client():
    """Reusable mock for openai.AsyncOpenAI returning a single completion."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=make_completion("  Hey you, I missed you.  "))
    client.close = AsyncMock()
    return client

@pytest.fixture
def completion_service(mock_openai_client):
    """CompletionService backed by the mocked OpenAI client."""
    from services.completion_service import CompletionService
    return CompletionService(mock_openai_client)

@pytest.fixture
def chat_service(completion_service):
    """ChatService with the default history limit."""
    from services.chat_service import ChatService
    return ChatService(completion_service, history_limit=12)

@pytest.fixture
def chat_request():
    """Standard ChatRequest for testing."""
    from models.api_models import ChatRequest
    return ChatRequest(
        user_message="Hi",
        companion_name="Luna",
        history=[]
    )

@pytest.fixture
def completion_client_builder():
    from tests.fixtures.mock_clients import OpenAIClientBuilder
    return OpenAIClientBuilder()

@pytest.fixture
def configured_app(chat_service):
    """App wired to the mocked completion client."""
    from fastapi.testclient import TestClient
    from main import create_app

    with TestClient(create_app(chat_service)) as client:
        yield client
