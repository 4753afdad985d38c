from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from datetime import date
from uuid import UUID

from valormind.core.database import get_db
from valormind.core.auth import get_current_user
from valormind.core.exceptions import handle_database_errors, NotFoundError
from valormind.schemas.auth import TokenData
from valormind.crud.journal_entry import journal_entry_crud
from valormind.schemas.journal import (
    JournalEntryUpsert,
    JournalEntryResponse,
    JournalEntryListResponse
)

router = APIRouter()

@router.get("", response_model=JournalEntryListResponse)
@handle_database_errors
async def get_journal_entries(
    start: Optional[date] = None,
    end: Optional[date] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    current_user: TokenData = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """List journal entries, newest day first, optionally within [start, end]"""
    filters = {"user_id": current_user.user_id}
    date_range = {}
    if start:
        date_range["gte"] = start
    if end:
        date_range["lte"] = end
    if date_range:
        filters["entry_date"] = date_range

    entries, total = await journal_entry_crud.get_multi(
        db, filters=filters, skip=skip, limit=limit, order_by="entry_date", order_desc=True
    )
    return JournalEntryListResponse(entries=entries, total=total, skip=skip, limit=limit)

@router.get("/{entry_date}", response_model=JournalEntryResponse)
@handle_database_errors
async def get_journal_entry(
    entry_date: date,
    current_user: TokenData = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Get the entry for a given day"""
    entry = await journal_entry_crud.get_by_date(db, user_id=current_user.user_id, entry_date=entry_date)
    if not entry:
        raise NotFoundError("JournalEntry")
    return entry

@router.put("/{entry_date}", response_model=JournalEntryResponse)
@handle_database_errors
async def save_journal_entry(
    entry_date: date,
    entry: JournalEntryUpsert,
    current_user: TokenData = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Create or update the entry for a given day"""
    return await journal_entry_crud.upsert_for_date(
        db, user_id=current_user.user_id, entry_date=entry_date, obj_in=entry
    )

@router.delete("/entries/{entry_id}")
@handle_database_errors
async def delete_journal_entry(
    entry_id: UUID,
    current_user: TokenData = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Soft delete a journal entry"""
    await journal_entry_crud.soft_delete_by_user_id(db, id=entry_id, user_id=current_user.user_id)
    return {"success": True, "message": "Journal entry deleted successfully"}
