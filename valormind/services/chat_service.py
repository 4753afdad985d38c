from typing import Dict, List
import logging

from valormind.core.config import settings
from valormind.core.exceptions import ValidationError
from valormind.core.prompts import get_system_prompt
from valormind.core.safety import screen_message
from valormind.models.chat_message import MessageRole
from valormind.schemas.chat import ChatRequest, ChatResponse
from valormind.services.llm_service import LLMService

logger = logging.getLogger(__name__)


class ChatService:
    """
    Screens the latest user message, then asks the model for a persona reply.

    A flagged message never reaches the model: the fixed safety message is
    returned with is_safety_response set.
    """

    def __init__(self, llm: LLMService):
        self.llm = llm

    @staticmethod
    def build_messages(request: ChatRequest) -> List[Dict[str, str]]:
        system_prompt = get_system_prompt(request.mode, request.user_name)
        messages = [{"role": "system", "content": system_prompt}]
        messages.extend(
            {"role": turn.role.value, "content": turn.content} for turn in request.messages
        )
        return messages

    async def respond(self, request: ChatRequest) -> ChatResponse:
        latest = request.messages[-1]
        if latest.role != MessageRole.USER:
            raise ValidationError("Last message must be from the user.")

        verdict = screen_message(latest.content)
        if verdict.flagged:
            logger.info("Safety layer triggered for user message.")
            return ChatResponse(text=verdict.message, is_safety_response=True)

        text = await self.llm.complete(
            self.build_messages(request),
            model=settings.chat_model,
            temperature=settings.chat_temperature,
            max_tokens=settings.chat_max_tokens,
        )
        return ChatResponse(text=text, is_safety_response=False)
