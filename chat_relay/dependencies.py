from __future__ import annotations

from functools import lru_cache

from chat_relay.core.settings import get_settings
from chat_relay.services.chat_service import ChatService
from chat_relay.services.gemini_service import GeminiService
from chat_relay.services.local_service import LocalResponseService
from chat_relay.services.suggestion_service import SuggestionService


@lru_cache
def get_gemini_service() -> GeminiService | None:
    settings = get_settings()
    if not settings.gemini_enabled:
        return None
    return GeminiService(settings=settings)


@lru_cache
def get_local_service() -> LocalResponseService:
    return LocalResponseService()


@lru_cache
def get_suggestion_service() -> SuggestionService:
    return SuggestionService()


def get_chat_service() -> ChatService:
    return ChatService(
        gemini_service=get_gemini_service(),
        local_service=get_local_service(),
    )
