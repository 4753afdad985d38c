from typing import Optional
from datetime import date
from sqlalchemy.ext.asyncio import AsyncSession
from .base import CRUDBase
from valormind.models.journal_entry import JournalEntry
from valormind.schemas.journal import JournalEntryUpsert

class CRUDJournalEntry(CRUDBase[JournalEntry, JournalEntryUpsert, JournalEntryUpsert]):
    async def get_by_date(self, db: AsyncSession, *, user_id: str, entry_date: date) -> Optional[JournalEntry]:
        entries, _ = await self.get_multi(
            db, filters={"user_id": user_id, "entry_date": entry_date}, limit=1
        )
        return entries[0] if entries else None

    async def upsert_for_date(
        self, db: AsyncSession, *, user_id: str, entry_date: date, obj_in: JournalEntryUpsert
    ) -> JournalEntry:
        """Update the user's entry for ``entry_date``, creating it if missing"""
        existing = await self.get_by_date(db, user_id=user_id, entry_date=entry_date)
        if existing:
            return await self.update(db, db_obj=existing, obj_in=obj_in)

        return await self.create_with_extra(
            db, obj_in=obj_in, extra_data={"user_id": user_id, "entry_date": entry_date}
        )

journal_entry_crud = CRUDJournalEntry(JournalEntry)
