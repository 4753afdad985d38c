from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from valormind.core.database import get_db
from valormind.core.auth import get_current_user
from valormind.core.exceptions import handle_database_errors, ValidationError
from valormind.schemas.auth import TokenData
from valormind.crud.chat_session import chat_session_crud
from valormind.crud.chat_message import chat_message_crud
from valormind.crud.therapy_insight import therapy_insight_crud
from valormind.schemas.insight import (
    InsightRequest,
    InsightGenerateResponse,
    InsightListResponse
)
from valormind.services.insight_service import InsightService
from valormind.services.llm_service import LLMService, get_llm_service

logger = logging.getLogger(__name__)

router = APIRouter()

def get_insight_service(llm: LLMService = Depends(get_llm_service)) -> InsightService:
    return InsightService(llm)

@router.post("", response_model=InsightGenerateResponse)
@handle_database_errors
async def generate_insights(
    request: InsightRequest,
    insight_service: InsightService = Depends(get_insight_service),
    current_user: TokenData = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """Analyze a session and store the resulting insights"""
    session = await chat_session_crud.get_by_user_id(
        db, id=request.session_id, user_id=current_user.user_id
    )

    messages = request.messages
    if messages is None:
        history, _ = await chat_message_crud.get_history(db, session_id=session.id, limit=1000)
        messages = InsightService.transcript_from_history(history)

    if not messages:
        raise ValidationError("Session ID and messages are required")

    logger.info(f"Generating insights for session {session.id}")
    payload = await insight_service.analyze(messages, request.user_name)

    insight = await therapy_insight_crud.create_for_session(
        db, obj_in=payload, session_id=session.id, user_id=current_user.user_id
    )
    return InsightGenerateResponse(success=True, insights=insight)

@router.get("", response_model=InsightListResponse)
@handle_database_errors
async def get_insights(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    current_user: TokenData = Depends(get_current_user),
    db: AsyncSession = Depends(get_db)
):
    """List the current user's insights, newest first"""
    insights, total = await therapy_insight_crud.get_by_field(
        db, field="user_id", value=current_user.user_id, skip=skip, limit=limit
    )
    return InsightListResponse(insights=insights, total=total, skip=skip, limit=limit)
