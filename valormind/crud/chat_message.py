from typing import List, Tuple
from sqlalchemy.ext.asyncio import AsyncSession
from .base import CRUDBase
from valormind.models.chat_message import ChatMessage
from valormind.schemas.session import MessageCreate
from uuid import UUID

class CRUDChatMessage(CRUDBase[ChatMessage, MessageCreate, MessageCreate]):
    async def get_history(
        self, db: AsyncSession, *, session_id: UUID, skip: int = 0, limit: int = 100
    ) -> Tuple[List[ChatMessage], int]:
        """Messages of a session, oldest first"""
        return await self.get_by_field(
            db, field="session_id", value=session_id,
            skip=skip, limit=limit, order_by="created_at", order_desc=False
        )

chat_message_crud = CRUDChatMessage(ChatMessage)
