from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from uuid import UUID

from valormind.core.database import get_db
from valormind.core.auth import get_current_user
from valormind.core.exceptions import handle_database_errors
from valormind.core.prompts import ConversationMode
from valormind.schemas.auth import TokenData
from valormind.crud.chat_session import chat_session_crud
from valormind.crud.chat_message import chat_message_crud
from valormind.schemas.session import (
    SessionCreate,
    SessionUpdate,
    SessionResponse,
    SessionListResponse,
    MessageCreate,
    MessageResponse,
    MessageListResponse
)

router = APIRouter()

@router.post("", response_model=SessionResponse)
@handle_database_errors
async def create_session(
    session: SessionCreate,
    current_user: TokenData = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Create a new chat session"""
    return await chat_session_crud.create_for_user(db, obj_in=session, user_id=current_user.user_id)

@router.get("", response_model=SessionListResponse)
@handle_database_errors
async def get_sessions(
    mode: Optional[ConversationMode] = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    current_user: TokenData = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Get the current user's sessions, most recently active first"""
    filters = {"user_id": current_user.user_id}
    if mode:
        filters["mode"] = mode

    sessions, total = await chat_session_crud.get_multi(
        db, filters=filters, skip=skip, limit=limit, order_by="updated_at", order_desc=True
    )

    return SessionListResponse(sessions=sessions, total=total, skip=skip, limit=limit)

@router.get("/{session_id}", response_model=SessionResponse)
@handle_database_errors
async def get_session(
    session_id: UUID,
    current_user: TokenData = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Get a specific session"""
    return await chat_session_crud.get_by_user_id(db, id=session_id, user_id=current_user.user_id)

@router.put("/{session_id}", response_model=SessionResponse)
@handle_database_errors
async def rename_session(
    session_id: UUID,
    session_update: SessionUpdate,
    current_user: TokenData = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Rename a session"""
    session = await chat_session_crud.get_by_user_id(db, id=session_id, user_id=current_user.user_id)
    return await chat_session_crud.update(db, db_obj=session, obj_in=session_update)

@router.delete("/{session_id}")
@handle_database_errors
async def delete_session(
    session_id: UUID,
    current_user: TokenData = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Soft delete a session and its messages"""
    await chat_session_crud.soft_delete_with_cascade(
        db, session_id=session_id, user_id=current_user.user_id
    )
    return {"success": True, "message": "Session deleted successfully"}

@router.get("/{session_id}/messages", response_model=MessageListResponse)
@handle_database_errors
async def get_session_messages(
    session_id: UUID,
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    current_user: TokenData = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Get a session's messages in chronological order"""
    await chat_session_crud.get_by_user_id(db, id=session_id, user_id=current_user.user_id)

    messages, total = await chat_message_crud.get_history(
        db, session_id=session_id, skip=skip, limit=limit
    )
    return MessageListResponse(messages=messages, total=total, skip=skip, limit=limit)

@router.post("/{session_id}/messages", response_model=MessageResponse)
@handle_database_errors
async def add_session_message(
    session_id: UUID,
    message: MessageCreate,
    current_user: TokenData = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Store a message in a session"""
    session = await chat_session_crud.get_by_user_id(db, id=session_id, user_id=current_user.user_id)
    return await chat_session_crud.add_message(db, session=session, obj_in=message)
