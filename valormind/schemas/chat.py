from pydantic import BaseModel, Field
from typing import Optional, List
from uuid import UUID
from valormind.core.prompts import ConversationMode
from valormind.models.chat_message import MessageRole

class ChatTurn(BaseModel):
    role: MessageRole
    content: str

class ChatRequest(BaseModel):
    messages: List[ChatTurn] = Field(..., min_length=1)
    # Unrecognized modes are accepted and answered with the friend persona
    mode: str = ConversationMode.FRIEND.value
    user_name: Optional[str] = Field(None, alias="userName")
    session_id: Optional[UUID] = Field(None, alias="sessionId")

    class Config:
        populate_by_name = True

class ChatResponse(BaseModel):
    text: str
    is_safety_response: bool = Field(False, alias="isSafetyResponse")

    class Config:
        populate_by_name = True
