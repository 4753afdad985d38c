from valormind.core.exceptions import UpstreamServiceError
from valormind.core.safety import SAFETY_MESSAGE
from valormind.main import app
from valormind.services.llm_service import LLMService, get_llm_service


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_crisis_message_returns_safety_response_without_model_call(client, fake_llm):
    response = client.post("/api/chat", json={
        "messages": [{"role": "user", "content": "I have been thinking about suicide"}],
        "mode": "friend",
    })

    assert response.status_code == 200
    assert response.json() == {"text": SAFETY_MESSAGE, "isSafetyResponse": True}
    assert fake_llm.calls == []


def test_regular_message_returns_model_reply(client, fake_llm):
    response = client.post("/api/chat", json={
        "messages": [{"role": "user", "content": "I aced my test!"}],
        "mode": "friend",
        "userName": "Amara",
    })

    assert response.status_code == 200
    assert response.json() == {"text": fake_llm.reply, "isSafetyResponse": False}
    assert "Amara" in fake_llm.calls[0]["messages"][0]["content"]


def test_last_message_from_assistant_is_rejected(client):
    response = client.post("/api/chat", json={
        "messages": [
            {"role": "user", "content": "hi"},
            {"role": "assistant", "content": "hello"},
        ],
        "mode": "vent",
    })

    assert response.status_code == 400
    assert response.json()["detail"] == "Last message must be from the user."


def test_empty_history_is_invalid(client):
    response = client.post("/api/chat", json={"messages": [], "mode": "friend"})
    assert response.status_code == 422


def test_upstream_failure_maps_to_bad_gateway(client, fake_llm):
    fake_llm.error = UpstreamServiceError("AI service failed with status: 500")

    response = client.post("/api/chat", json={"messages": [{"role": "user", "content": "hello"}]})

    assert response.status_code == 502
    assert response.json()["detail"] == "AI service failed with status: 500"


def test_missing_api_key_is_service_unavailable(client):
    app.dependency_overrides[get_llm_service] = lambda: LLMService(api_key="")

    response = client.post("/api/chat", json={"messages": [{"role": "user", "content": "hello"}]})

    assert response.status_code == 503
    assert response.json()["detail"] == "AI service is not configured"


def test_crisis_message_skips_model_even_without_api_key(client):
    app.dependency_overrides[get_llm_service] = lambda: LLMService(api_key="")

    response = client.post("/api/chat", json={"messages": [{"role": "user", "content": "I want to die"}]})

    assert response.status_code == 200
    assert response.json()["isSafetyResponse"] is True


def test_chat_status_reports_configuration(client):
    response = client.get("/api/chat/status")
    assert response.status_code == 200
    assert response.json()["ai_configured"] is True


def test_persistence_routes_require_a_token(client):
    for path in ("/api/sessions", "/api/journal", "/api/profile", "/api/therapy-insights"):
        assert client.get(path).status_code in (401, 403)
