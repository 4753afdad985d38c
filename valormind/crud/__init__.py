# CRUD operations package

from .chat_session import chat_session_crud
from .chat_message import chat_message_crud
from .journal_entry import journal_entry_crud
from .user_profile import user_profile_crud
from .therapy_insight import therapy_insight_crud

__all__ = [
    'chat_session_crud',
    'chat_message_crud',
    'journal_entry_crud',
    'user_profile_crud',
    'therapy_insight_crud'
]
