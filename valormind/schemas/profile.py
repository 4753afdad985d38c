from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from uuid import UUID
from valormind.core.prompts import ConversationMode
from valormind.models.user_profile import Theme

class ProfileBase(BaseModel):
    mood: Optional[str] = None
    gender: Optional[str] = None
    theme: Optional[Theme] = None
    persona: Optional[ConversationMode] = None
    onboarding_completed: Optional[bool] = None

class ProfileUpdate(ProfileBase):
    name: Optional[str] = Field(None, min_length=1, max_length=255)

class ProfileResponse(ProfileBase):
    id: UUID
    user_id: str
    name: str
    onboarding_completed: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
