"""
Pytest configuration and fixtures
"""
from datetime import datetime

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import DEFAULT_TAROT_API_URL, Settings, get_settings
from app.core.dependencies import get_clock, get_http_client
from app.main import app

GROQ_URL = "https://api.groq.com/openai/v1/chat/completions"

# Monday morning
FIXED_NOW = datetime(2026, 10, 19, 9, 30)

SAMPLE_CARDS = [
    {"name": "The Fool", "name_short": "ar00", "image": "https://www.sacred-texts.com/tarot/pkt/img/ar00.jpg", "reversed": False},
    {"name": "The Tower", "name_short": "ar16", "image": "https://www.sacred-texts.com/tarot/pkt/img/ar16.jpg", "reversed": True},
    {"name": "The Star", "name_short": "ar17", "image": "https://www.sacred-texts.com/tarot/pkt/img/ar17.jpg", "reversed": False},
]


def make_settings(**overrides) -> Settings:
    """Settings isolated from the process environment and any .env file."""
    values = {
        "LLM_PROVIDER": "groq",
        "GROQ_API_KEY": "test-groq-key",
        "OPENAI_API_KEY": None,
        "GEMINI_API_KEY": None,
        "LLM_MODEL": None,
        "LLM_ENDPOINT": None,
        "LLM_TEMPERATURE": 0.7,
        "LLM_MAX_TOKENS": 250,
        "READING_STYLE": "practical",
        "READING_TIMEZONE": None,
        "TAROT_API_URL": DEFAULT_TAROT_API_URL,
        "BACKFILL_CARD_IMAGES": False,
        "CARD_IMAGE_BASE_URL": "https://www.sacred-texts.com/tarot/pkt/img",
        "HTTP_TIMEOUT_SECONDS": 15.0,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def completion_body(content):
    return {"choices": [{"index": 0, "message": {"role": "assistant", "content": content}}]}


class FakeUpstream:
    """Stands in for the card service and the chat completion endpoint."""

    def __init__(self):
        self.requests = []
        self.cards_response = httpx.Response(200, json={"nhits": 3, "cards": SAMPLE_CARDS})
        self.llm_response = httpx.Response(200, json=completion_body("Your journey begins anew..."))

    @property
    def card_requests(self):
        return [r for r in self.requests if r.url.host == "tarot-api-3hv5.onrender.com"]

    @property
    def llm_requests(self):
        return [r for r in self.requests if r.url.host != "tarot-api-3hv5.onrender.com"]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "tarot-api-3hv5.onrender.com":
            response = self.cards_response
        else:
            response = self.llm_response
        if isinstance(response, Exception):
            raise response
        return response

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest.fixture
def settings():
    return make_settings()


@pytest.fixture
def client(upstream, settings):
    async def override_http_client():
        async with upstream.client() as http_client:
            yield http_client

    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_client] = override_http_client
    app.dependency_overrides[get_clock] = lambda: (lambda: FIXED_NOW)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
