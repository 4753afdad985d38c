from sqlalchemy import Column, Text, ForeignKey, Enum, Boolean
from sqlalchemy.orm import relationship
from sqlalchemy.dialects.postgresql import UUID, JSONB
import uuid
import enum
from .base import Base, TimestampMixin, enum_values

class MessageRole(str, enum.Enum):
    USER = "user"
    ASSISTANT = "assistant"

class ChatMessage(Base, TimestampMixin):
    __tablename__ = "chat_messages"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    session_id = Column(UUID(as_uuid=True), ForeignKey("chat_sessions.id"), nullable=False, index=True)
    role = Column(Enum(MessageRole, name="message_role", values_callable=enum_values), nullable=False)
    content = Column(Text, nullable=False)
    attachments = Column(JSONB, nullable=False, default=list)
    is_safety_response = Column(Boolean, default=False, nullable=False)

    # Relationships
    session = relationship("ChatSession", back_populates="messages")
