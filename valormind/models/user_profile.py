from sqlalchemy import Column, String, Boolean, Enum
from sqlalchemy.dialects.postgresql import UUID
import uuid
import enum
from .base import Base, TimestampMixin, enum_values
from valormind.core.prompts import ConversationMode

class Theme(str, enum.Enum):
    LIGHT = "light"
    DARK = "dark"

class UserProfile(Base, TimestampMixin):
    __tablename__ = "user_profiles"

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(String, nullable=False, unique=True, index=True)
    name = Column(String(255), nullable=False)
    mood = Column(String(50), nullable=True)
    gender = Column(String(50), nullable=True)
    theme = Column(Enum(Theme, name="theme", values_callable=enum_values), nullable=True)
    persona = Column(Enum(ConversationMode, name="conversation_mode", values_callable=enum_values), nullable=True)
    onboarding_completed = Column(Boolean, default=False, nullable=False)
