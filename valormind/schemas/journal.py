from pydantic import BaseModel
from typing import Optional, List
from datetime import datetime, date
from uuid import UUID

class JournalEntryBase(BaseModel):
    title: Optional[str] = None
    content: str = ""
    mood: Optional[str] = None
    emojis: List[str] = []

class JournalEntryUpsert(JournalEntryBase):
    pass

class JournalEntryResponse(JournalEntryBase):
    id: UUID
    user_id: str
    entry_date: date
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class JournalEntryListResponse(BaseModel):
    entries: List[JournalEntryResponse]
    total: int
    skip: int
    limit: int
