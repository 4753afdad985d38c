import json
import uuid
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from valormind.core.auth import get_current_user
from valormind.core.database import get_db
from valormind.core.exceptions import NotFoundError
from valormind.crud.chat_message import chat_message_crud
from valormind.crud.chat_session import chat_session_crud
from valormind.crud.therapy_insight import therapy_insight_crud
from valormind.main import app
from valormind.models.chat_message import MessageRole
from valormind.schemas.auth import TokenData

SESSION_ID = uuid.uuid4()

ANALYSIS = {
    "mood_analysis": {"primary_mood": "anxious", "mood_intensity": 6, "mood_trends": ["exam pressure"]},
    "key_themes": ["exams"],
    "progress_indicators": {
        "engagement_level": "high",
        "openness": "high",
        "insight_development": "medium",
        "coping_strategies_used": [],
    },
    "recommendations": ["study breaks"],
    "risk_assessment": "low",
}


@pytest.fixture
def insights_db(client, fake_llm, monkeypatch):
    """Signed-in caller owning SESSION_ID, with stored history and insight CRUD recorded"""
    record = SimpleNamespace(
        history=[
            SimpleNamespace(role=MessageRole.USER, content="exams are stressing me out"),
            SimpleNamespace(role=MessageRole.ASSISTANT, content="That sounds like a lot to carry."),
        ],
        history_calls=[],
        created=[],
    )

    async def get_by_user_id(db, id, user_id, **kwargs):
        if id != SESSION_ID or user_id != "user-1":
            raise NotFoundError("ChatSession")
        return SimpleNamespace(id=SESSION_ID, user_id=user_id)

    async def get_history(db, *, session_id, skip=0, limit=100):
        record.history_calls.append(session_id)
        return record.history, len(record.history)

    async def create_for_session(db, *, obj_in, session_id, user_id):
        record.created.append(obj_in)
        return SimpleNamespace(
            **obj_in.model_dump(),
            id=uuid.uuid4(),
            session_id=session_id,
            user_id=user_id,
            created_at=datetime.now(timezone.utc),
        )

    monkeypatch.setattr(chat_session_crud, "get_by_user_id", get_by_user_id)
    monkeypatch.setattr(chat_message_crud, "get_history", get_history)
    monkeypatch.setattr(therapy_insight_crud, "create_for_session", create_for_session)
    app.dependency_overrides[get_current_user] = lambda: TokenData(user_id="user-1")
    app.dependency_overrides[get_db] = lambda: object()
    fake_llm.reply = json.dumps(ANALYSIS)
    return record


def test_empty_messages_are_rejected(client, fake_llm, insights_db):
    response = client.post("/api/therapy-insights", json={"sessionId": str(SESSION_ID), "messages": []})

    assert response.status_code == 400
    assert response.json()["detail"] == "Session ID and messages are required"
    assert fake_llm.calls == []


def test_session_of_another_user_is_not_found(client, fake_llm, insights_db):
    response = client.post("/api/therapy-insights", json={
        "sessionId": str(uuid.uuid4()),
        "messages": [{"sender": "user", "content": "hi"}],
    })

    assert response.status_code == 404
    assert fake_llm.calls == []
    assert insights_db.created == []


def test_stored_history_is_analyzed_when_messages_are_omitted(client, fake_llm, insights_db):
    response = client.post("/api/therapy-insights", json={"sessionId": str(SESSION_ID), "userName": "Amara"})

    assert response.status_code == 200
    assert insights_db.history_calls == [SESSION_ID]
    prompt = fake_llm.calls[0]["messages"][0]["content"]
    assert "User: exams are stressing me out\nAI: That sounds like a lot to carry." in prompt
    body = response.json()
    assert body["success"] is True
    assert body["insights"]["session_id"] == str(SESSION_ID)
    assert body["insights"]["mood_analysis"]["primary_mood"] == "anxious"


def test_session_without_stored_messages_is_rejected(client, fake_llm, insights_db):
    insights_db.history = []

    response = client.post("/api/therapy-insights", json={"sessionId": str(SESSION_ID)})

    assert response.status_code == 400
    assert fake_llm.calls == []


def test_supplied_messages_are_analyzed_and_stored(client, fake_llm, insights_db):
    response = client.post("/api/therapy-insights", json={
        "sessionId": str(SESSION_ID),
        "messages": [{"sender": "user", "content": "work is a lot"}],
    })

    assert response.status_code == 200
    assert insights_db.history_calls == []
    assert len(insights_db.created) == 1
    assert response.json()["insights"]["user_id"] == "user-1"
