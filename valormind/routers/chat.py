from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import logging

from valormind.core.auth import get_optional_user
from valormind.core.database import get_optional_db
from valormind.core.exceptions import handle_database_errors
from valormind.crud.chat_session import chat_session_crud
from valormind.models.chat_message import MessageRole
from valormind.models.chat_session import ChatSession
from valormind.schemas.auth import TokenData
from valormind.schemas.chat import ChatRequest, ChatResponse
from valormind.schemas.session import MessageCreate
from valormind.services.chat_service import ChatService
from valormind.services.llm_service import LLMService, get_llm_service

logger = logging.getLogger(__name__)

router = APIRouter()

def get_chat_service(llm: LLMService = Depends(get_llm_service)) -> ChatService:
    return ChatService(llm)

@handle_database_errors
async def find_owned_session(db: AsyncSession, *, request: ChatRequest, user_id: str) -> ChatSession:
    return await chat_session_crud.get_by_user_id(db, id=request.session_id, user_id=user_id)

@handle_database_errors
async def persist_exchange(
    db: AsyncSession, *, session: ChatSession, request: ChatRequest, response: ChatResponse
) -> None:
    """Store the latest user message and the reply in the caller's session"""
    await chat_session_crud.add_message(
        db, session=session,
        obj_in=MessageCreate(role=MessageRole.USER, content=request.messages[-1].content)
    )
    await chat_session_crud.add_message(
        db, session=session,
        obj_in=MessageCreate(
            role=MessageRole.ASSISTANT,
            content=response.text,
            is_safety_response=response.is_safety_response
        )
    )

@router.post("", response_model=ChatResponse)
async def send_chat_message(
    chat_request: ChatRequest,
    chat_service: ChatService = Depends(get_chat_service),
    current_user: Optional[TokenData] = Depends(get_optional_user),
    db: Optional[AsyncSession] = Depends(get_optional_db)
):
    """Reply to a conversation in the requested persona mode"""
    session = None
    if chat_request.session_id and current_user and db is not None:
        # Unknown or foreign sessions are rejected before the model is called
        session = await find_owned_session(db, request=chat_request, user_id=current_user.user_id)
    elif chat_request.session_id:
        logger.info("Session id given without an authenticated user or database, reply not stored")

    response = await chat_service.respond(chat_request)

    if session is not None:
        await persist_exchange(db, session=session, request=chat_request, response=response)

    return response

@router.get("/status")
async def chat_status(llm: LLMService = Depends(get_llm_service)):
    """Check chat service status"""
    return JSONResponse(
        content={
            "success": True,
            "message": "Chat service is running",
            "ai_configured": llm.configured
        }
    )
