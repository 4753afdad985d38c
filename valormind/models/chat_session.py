from sqlalchemy import Column, String, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.dialects.postgresql import UUID
import uuid
from .base import Base, TimestampMixin, enum_values
from valormind.core.prompts import ConversationMode

class ChatSession(Base, TimestampMixin):
    __tablename__ = "chat_sessions"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(String, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    mode = Column(
        Enum(ConversationMode, name="conversation_mode", values_callable=enum_values),
        nullable=False,
        default=ConversationMode.FRIEND,
    )

    # Relationships
    messages = relationship("ChatMessage", back_populates="session", cascade="all, delete-orphan")
    insights = relationship("TherapyInsight", back_populates="session", cascade="all, delete-orphan")
