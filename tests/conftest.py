import pytest
from fastapi.testclient import TestClient

from valormind.main import app
from valormind.core.database import get_optional_db
from valormind.services.llm_service import get_llm_service


class FakeLLMService:
    """Records completion calls instead of reaching the hosted model"""

    configured = True

    def __init__(self, reply="Hey Amara, I'm here for you 🙌", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    async def complete(self, messages, *, model, temperature, max_tokens):
        self.calls.append({
            "messages": messages,
            "model": model,
            "temperature": temperature,
            "max_tokens": max_tokens,
        })
        if self.error:
            raise self.error
        return self.reply


@pytest.fixture
def fake_llm():
    return FakeLLMService()


@pytest.fixture
def client(fake_llm):
    app.dependency_overrides[get_llm_service] = lambda: fake_llm
    app.dependency_overrides[get_optional_db] = lambda: None
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
