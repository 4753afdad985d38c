from datetime import datetime, timezone
from sqlalchemy.ext.asyncio import AsyncSession
from .base import CRUDBase
from valormind.models.chat_session import ChatSession
from valormind.models.chat_message import ChatMessage, MessageRole
from valormind.schemas.session import SessionCreate, SessionUpdate, MessageCreate
from valormind.utils.utils import session_title_from_message, default_session_title
from uuid import UUID

class CRUDChatSession(CRUDBase[ChatSession, SessionCreate, SessionUpdate]):
    async def create_for_user(self, db: AsyncSession, *, obj_in: SessionCreate, user_id: str) -> ChatSession:
        """Create a session, titled "New <mode> chat" unless a title is given"""
        title = obj_in.title or default_session_title(obj_in.mode.value)
        return await self.create_with_extra(
            db, obj_in=obj_in, extra_data={"user_id": user_id, "title": title}
        )

    async def add_message(self, db: AsyncSession, *, session: ChatSession, obj_in: MessageCreate) -> ChatMessage:
        """
        Append a message and bump the session's updated_at.

        The first user message in a session also becomes the session title.
        """
        from .chat_message import chat_message_crud

        if obj_in.role == MessageRole.USER:
            previous_user_messages = await chat_message_crud.count(
                db, filters={"session_id": session.id, "role": MessageRole.USER}
            )
            if previous_user_messages == 0:
                session.title = session_title_from_message(obj_in.content)

        session.updated_at = datetime.now(timezone.utc)
        db.add(session)

        return await chat_message_crud.create_with_extra(
            db, obj_in=obj_in, extra_data={"session_id": session.id}
        )

    async def soft_delete_with_cascade(
        self, db: AsyncSession, *, session_id: UUID, user_id: str, raise_if_not_found: bool = True
    ) -> bool:
        """Soft delete a session and its messages"""
        from .chat_message import chat_message_crud

        await self.get_by_user_id(db, id=session_id, user_id=user_id)
        await chat_message_crud.update_by_field(
            db, field="session_id", value=session_id, obj_in={"is_deleted": True}
        )

        return await self.soft_delete_by_user_id(
            db, id=session_id, user_id=user_id, raise_if_not_found=raise_if_not_found
        )

chat_session_crud = CRUDChatSession(ChatSession)
