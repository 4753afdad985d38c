from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.dialects.postgresql import UUID, JSONB
import uuid
from .base import Base, TimestampMixin

class TherapyInsight(Base, TimestampMixin):
    __tablename__ = "therapy_insights"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    session_id = Column(UUID(as_uuid=True), ForeignKey("chat_sessions.id"), nullable=False, index=True)
    user_id = Column(String, nullable=False, index=True)
    mood_analysis = Column(JSONB, nullable=False)
    key_themes = Column(JSONB, nullable=False, default=list)
    progress_indicators = Column(JSONB, nullable=False)
    recommendations = Column(JSONB, nullable=False, default=list)
    risk_assessment = Column(String(20), nullable=False, default="low")

    # Relationships
    session = relationship("ChatSession", back_populates="insights")
