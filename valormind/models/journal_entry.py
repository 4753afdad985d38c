from sqlalchemy import Column, String, Text, Date, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID, JSONB
import uuid
from .base import Base, TimestampMixin

class JournalEntry(Base, TimestampMixin):
    """One entry per user per calendar day"""
    __tablename__ = "journal_entries"
    __table_args__ = (UniqueConstraint("user_id", "entry_date", name="uq_journal_entries_user_date"),)

    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4, index=True)
    user_id = Column(String, nullable=False, index=True)
    entry_date = Column(Date, nullable=False, index=True)
    title = Column(String(255), nullable=True)
    content = Column(Text, nullable=False, default="")
    mood = Column(String(50), nullable=True)
    emojis = Column(JSONB, nullable=False, default=list)
