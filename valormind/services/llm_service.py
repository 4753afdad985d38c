from openai import AsyncOpenAI, APIError, APIStatusError
from typing import Dict, List, Optional
import logging

from valormind.core.config import settings
from valormind.core.exceptions import ServiceNotConfiguredError, UpstreamServiceError

logger = logging.getLogger(__name__)


class LLMService:
    """Thin async client for the hosted, OpenAI-compatible completion endpoint"""

    def __init__(self, api_key: Optional[str] = None, base_url: Optional[str] = None):
        self.client: Optional[AsyncOpenAI] = None
        key = (settings.openrouter_api_key if api_key is None else api_key).strip()
        if key:
            self.client = AsyncOpenAI(
                api_key=key,
                base_url=base_url or settings.openrouter_base_url,
                default_headers={
                    "HTTP-Referer": settings.app_referer,
                    "X-Title": settings.app_title,
                },
            )
        else:
            logger.warning("OpenRouter API key not provided, AI replies are disabled")

    @property
    def configured(self) -> bool:
        return self.client is not None

    async def complete(
        self,
        messages: List[Dict[str, str]],
        *,
        model: str,
        temperature: float,
        max_tokens: int,
    ) -> str:
        """Run a chat completion and return the stripped reply text"""
        if not self.client:
            raise ServiceNotConfiguredError()

        try:
            response = await self.client.chat.completions.create(
                model=model,
                messages=messages,
                temperature=temperature,
                max_tokens=max_tokens,
            )
        except APIStatusError as e:
            logger.error(f"❌ AI service error: status={e.status_code}")
            raise UpstreamServiceError(f"AI service failed with status: {e.status_code}")
        except APIError as e:
            logger.error(f"❌ AI service request failed: {e}")
            raise UpstreamServiceError("AI service request failed")

        content = response.choices[0].message.content if response.choices else None
        if not content or not content.strip():
            logger.error("Invalid response structure from AI service")
            raise UpstreamServiceError("Failed to get a valid response from the AI.")

        return content.strip()


_llm_service: Optional[LLMService] = None


def get_llm_service() -> LLMService:
    """Dependency returning the process-wide LLM client"""
    global _llm_service
    if _llm_service is None:
        _llm_service = LLMService()
    return _llm_service
