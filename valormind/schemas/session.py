from pydantic import BaseModel, Field
from typing import Optional, List
from datetime import datetime
from uuid import UUID
from valormind.core.prompts import ConversationMode
from valormind.models.chat_message import MessageRole

class SessionBase(BaseModel):
    title: Optional[str] = None

class SessionCreate(SessionBase):
    mode: ConversationMode = ConversationMode.FRIEND

class SessionUpdate(SessionBase):
    title: Optional[str] = Field(None, min_length=1, max_length=255)

class SessionResponse(SessionBase):
    id: UUID
    user_id: str
    title: str
    mode: ConversationMode
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class SessionListResponse(BaseModel):
    sessions: List[SessionResponse]
    total: int
    skip: int
    limit: int

class MessageCreate(BaseModel):
    role: MessageRole
    content: str
    attachments: List[str] = []
    is_safety_response: bool = False

class MessageResponse(BaseModel):
    id: UUID
    session_id: UUID
    role: MessageRole
    content: str
    attachments: List[str] = []
    is_safety_response: bool
    created_at: datetime

    class Config:
        from_attributes = True

class MessageListResponse(BaseModel):
    messages: List[MessageResponse]
    total: int
    skip: int
    limit: int
