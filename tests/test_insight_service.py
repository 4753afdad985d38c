import json
from types import SimpleNamespace

from valormind.core.config import settings
from valormind.core.prompts import INSIGHT_FALLBACK
from valormind.models.chat_message import MessageRole
from valormind.schemas.insight import TranscriptMessage
from valormind.services.insight_service import InsightService

VALID_INSIGHT = {
    "mood_analysis": {"primary_mood": "anxious", "mood_intensity": 7, "mood_trends": ["moments of hope"]},
    "key_themes": ["work stress"],
    "progress_indicators": {
        "engagement_level": "high",
        "openness": "medium",
        "insight_development": "medium",
        "coping_strategies_used": ["deep breathing"],
    },
    "recommendations": ["practice mindfulness"],
    "risk_assessment": "low",
}


def test_build_transcript_labels_speakers():
    transcript = InsightService.build_transcript([
        TranscriptMessage(sender="user", content="I can't sleep"),
        TranscriptMessage(sender="ai", content="That sounds exhausting."),
    ])
    assert transcript == "User: I can't sleep\nAI: That sounds exhausting."


def test_transcript_from_history_maps_roles():
    history = [
        SimpleNamespace(role=MessageRole.USER, content="hi"),
        SimpleNamespace(role=MessageRole.ASSISTANT, content="hello"),
    ]
    transcript = InsightService.transcript_from_history(history)
    assert [m.sender for m in transcript] == ["user", "ai"]


def test_parse_insights_accepts_json_wrapped_in_prose():
    raw = "Here is the analysis:\n```json\n" + json.dumps(VALID_INSIGHT) + "\n```\nTake care!"
    payload = InsightService.parse_insights(raw)
    assert payload.mood_analysis.primary_mood == "anxious"
    assert payload.key_themes == ["work stress"]


def test_parse_insights_falls_back_on_garbage():
    payload = InsightService.parse_insights("I could not analyze this session.")
    assert payload.model_dump() == INSIGHT_FALLBACK


def test_parse_insights_falls_back_on_wrong_shape():
    broken = dict(VALID_INSIGHT, mood_analysis={"primary_mood": "sad", "mood_intensity": 42})
    payload = InsightService.parse_insights(json.dumps(broken))
    assert payload.mood_analysis.primary_mood == "mixed"
    assert payload.risk_assessment == "low"


async def test_analyze_sends_transcript_to_insights_model(fake_llm):
    fake_llm.reply = json.dumps(VALID_INSIGHT)
    service = InsightService(fake_llm)

    payload = await service.analyze(
        [TranscriptMessage(sender="user", content="work is a lot")], user_name="Amara"
    )

    assert payload.recommendations == ["practice mindfulness"]
    call = fake_llm.calls[0]
    assert call["model"] == settings.insights_model
    assert call["temperature"] == settings.insights_temperature
    assert "User: work is a lot" in call["messages"][0]["content"]
    assert "Amara" in call["messages"][0]["content"]


def test_parse_insights_falls_back_when_risk_assessment_exceeds_column():
    from valormind.models.therapy_insight import TherapyInsight

    verbose = dict(VALID_INSIGHT, risk_assessment="moderate - monitor for hopelessness")
    payload = InsightService.parse_insights(json.dumps(verbose))

    limit = TherapyInsight.__table__.c.risk_assessment.type.length
    assert payload.risk_assessment == "low"
    assert len(payload.risk_assessment) <= limit
