from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, Sequence

from google import genai
from google.genai import errors, types

from chat_relay.core.errors import UpstreamError
from chat_relay.core.settings import Settings, get_settings
from chat_relay.models.chat import ChatTurn

logger = logging.getLogger(__name__)

GENERATION_CONFIG = types.GenerateContentConfig(
    temperature=0.7,
    top_p=0.95,
    max_output_tokens=1000,
)


def _upstream_role(role: Any) -> str:
    # generateContent only knows "user" and "model".
    if isinstance(role, str) and role in {"assistant", "model"}:
        return "model"
    return "user"


def _turn_text(content: Any) -> str:
    if not content:
        return ""
    if isinstance(content, str):
        return content
    return json.dumps(content)


def build_contents(message: str, conversation: Sequence[ChatTurn]) -> list[types.Content]:
    contents = [
        types.Content(
            role=_upstream_role(turn.role),
            parts=[types.Part.from_text(text=_turn_text(turn.content))],
        )
        for turn in conversation
    ]
    contents.append(
        types.Content(role="user", parts=[types.Part.from_text(text=message)])
    )
    return contents


def extract_reply_text(response: types.GenerateContentResponse) -> str:
    """Return the text of the first part of the first candidate."""
    candidates = response.candidates or []
    if not candidates or candidates[0].content is None:
        raise ValueError("Gemini response has no candidates")

    parts = candidates[0].content.parts or []
    if not parts or parts[0].text is None:
        raise ValueError("Gemini response candidate has no text part")
    return parts[0].text


def _upstream_error_message(exc: errors.APIError) -> str:
    if exc.message:
        return exc.message
    details: Any = exc.details
    if isinstance(details, (dict, list)):
        return json.dumps(details)
    return str(details or exc)


class GeminiService:
    def __init__(self, settings: Settings | None = None, client: Any | None = None):
        self._settings = settings or get_settings()

        if client is None:
            if not self._settings.gemini_api_key:
                raise RuntimeError("GEMINI_API_KEY is not configured")

            http_options = None
            if self._settings.gemini_timeout_ms:
                http_options = types.HttpOptions(timeout=self._settings.gemini_timeout_ms)
            client = genai.Client(
                api_key=self._settings.gemini_api_key,
                http_options=http_options,
            )
        self._client = client

    async def generate_chat_response(
        self, message: str, conversation: Sequence[ChatTurn]
    ) -> str:
        contents = build_contents(message, conversation)

        def _send() -> types.GenerateContentResponse:
            return self._client.models.generate_content(
                model=self._settings.gemini_model,
                contents=contents,
                config=GENERATION_CONFIG,
            )

        try:
            response = await asyncio.to_thread(_send)
        except errors.APIError as exc:
            logger.error(
                "Gemini error: code=%s status=%s details=%s",
                exc.code,
                exc.status,
                json.dumps(exc.details, indent=2, default=str),
            )
            raise UpstreamError(_upstream_error_message(exc)) from exc

        return extract_reply_text(response)
