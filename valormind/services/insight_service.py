from typing import List, Optional
import logging

from pydantic import ValidationError as PydanticValidationError

from valormind.core.config import settings
from valormind.core.prompts import INSIGHT_ANALYSIS_PROMPT, INSIGHT_FALLBACK, DEFAULT_USER_NAME
from valormind.models.chat_message import ChatMessage, MessageRole
from valormind.schemas.insight import InsightPayload, TranscriptMessage
from valormind.services.llm_service import LLMService
from valormind.utils.utils import extract_json_object

logger = logging.getLogger(__name__)


class InsightService:
    """Summarizes a chat session into structured therapy insights"""

    def __init__(self, llm: LLMService):
        self.llm = llm

    @staticmethod
    def transcript_from_history(history: List[ChatMessage]) -> List[TranscriptMessage]:
        return [
            TranscriptMessage(
                sender="user" if m.role == MessageRole.USER else "ai",
                content=m.content,
            )
            for m in history
        ]

    @staticmethod
    def build_transcript(messages: List[TranscriptMessage]) -> str:
        return "\n".join(
            f"{'User' if m.sender == 'user' else 'AI'}: {m.content}" for m in messages
        )

    @staticmethod
    def parse_insights(raw: str) -> InsightPayload:
        """Parse the model reply, using the fixed fallback when it is not valid insight JSON"""
        data = extract_json_object(raw)
        if data is not None:
            try:
                return InsightPayload.model_validate(data)
            except PydanticValidationError as e:
                logger.warning(f"⚠️ AI insights did not match the expected shape: {e}")
        else:
            logger.warning("⚠️ Failed to parse AI analysis as JSON")

        logger.info("Using fallback structured insights")
        return InsightPayload.model_validate(INSIGHT_FALLBACK)

    async def analyze(self, messages: List[TranscriptMessage], user_name: Optional[str] = None) -> InsightPayload:
        conversation = self.build_transcript(messages)
        logger.info(f"Analyzing {len(messages)} messages ({len(conversation)} characters)")

        prompt = INSIGHT_ANALYSIS_PROMPT.format(
            user_name=(user_name or "").strip() or DEFAULT_USER_NAME,
            conversation=conversation,
        )
        raw = await self.llm.complete(
            [{"role": "user", "content": prompt}],
            model=settings.insights_model,
            temperature=settings.insights_temperature,
            max_tokens=settings.insights_max_tokens,
        )
        return self.parse_insights(raw)
