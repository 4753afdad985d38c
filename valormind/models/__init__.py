# Database models package

from .base import Base
from .user_profile import UserProfile, Theme
from .chat_session import ChatSession
from .chat_message import ChatMessage, MessageRole
from .journal_entry import JournalEntry
from .therapy_insight import TherapyInsight

__all__ = [
    'Base',
    'UserProfile',
    'Theme',
    'ChatSession',
    'ChatMessage',
    'MessageRole',
    'JournalEntry',
    'TherapyInsight'
]
