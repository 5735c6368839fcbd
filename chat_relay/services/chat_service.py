from __future__ import annotations

from typing import Any

from chat_relay.core.clock import utc_now_iso
from chat_relay.models.chat import ChatResponse, parse_conversation
from chat_relay.services.gemini_service import GeminiService
from chat_relay.services.local_service import LocalResponseService


class ChatService:
    """Routes a chat message to Gemini when a client is configured, else to canned replies."""

    def __init__(
        self,
        gemini_service: GeminiService | None,
        local_service: LocalResponseService,
    ) -> None:
        self._gemini = gemini_service
        self._local = local_service

    async def reply(self, message: str, conversation: Any = None) -> ChatResponse:
        if self._gemini is not None:
            text = await self._gemini.generate_chat_response(
                message=message,
                conversation=parse_conversation(conversation),
            )
            return ChatResponse(source="gemini", response=text, timestamp=utc_now_iso())

        text = self._local.generate_chat_response(message)
        return ChatResponse(source="local", response=text, timestamp=utc_now_iso())
