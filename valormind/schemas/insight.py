from pydantic import BaseModel, Field
from typing import Optional, List, Literal
from datetime import datetime
from uuid import UUID

class MoodAnalysis(BaseModel):
    primary_mood: str
    mood_intensity: int = Field(..., ge=0, le=10)
    mood_trends: List[str] = []

class ProgressIndicators(BaseModel):
    engagement_level: str
    openness: str
    insight_development: str
    coping_strategies_used: List[str] = []

class InsightPayload(BaseModel):
    """Structured analysis returned by the model"""
    mood_analysis: MoodAnalysis
    key_themes: List[str] = []
    progress_indicators: ProgressIndicators
    recommendations: List[str] = []
    risk_assessment: str = Field("low", max_length=20)

class TranscriptMessage(BaseModel):
    sender: Literal["user", "ai"]
    content: str

class InsightRequest(BaseModel):
    session_id: UUID = Field(..., alias="sessionId")
    messages: Optional[List[TranscriptMessage]] = None
    user_name: Optional[str] = Field(None, alias="userName")

    class Config:
        populate_by_name = True

class InsightResponse(InsightPayload):
    id: UUID
    session_id: UUID
    user_id: str
    created_at: datetime

    class Config:
        from_attributes = True

class InsightGenerateResponse(BaseModel):
    success: bool
    insights: InsightResponse

class InsightListResponse(BaseModel):
    insights: List[InsightResponse]
    total: int
    skip: int
    limit: int
