from sqlalchemy.ext.asyncio import AsyncSession
from .base import CRUDBase
from valormind.models.therapy_insight import TherapyInsight
from valormind.schemas.insight import InsightPayload
from uuid import UUID

class CRUDTherapyInsight(CRUDBase[TherapyInsight, InsightPayload, InsightPayload]):
    async def create_for_session(
        self, db: AsyncSession, *, obj_in: InsightPayload, session_id: UUID, user_id: str
    ) -> TherapyInsight:
        return await self.create_with_extra(
            db, obj_in=obj_in, extra_data={"session_id": session_id, "user_id": user_id}
        )

therapy_insight_crud = CRUDTherapyInsight(TherapyInsight)
