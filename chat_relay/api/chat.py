import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request

from chat_relay.core.clock import utc_now_iso
from chat_relay.core.errors import ChatRelayError, InternalError, InvalidInputError
from chat_relay.dependencies import get_chat_service, get_suggestion_service
from chat_relay.models.chat import (
    ChatRequest,
    ChatResponse,
    RegenerateRequest,
    RegenerateResponse,
    SuggestionsResponse,
)
from chat_relay.services.chat_service import ChatService
from chat_relay.services.suggestion_service import SuggestionService

logger = logging.getLogger(__name__)

router = APIRouter()

REPHRASE_PREFIX = "Let me rephrase that:\n\n"


async def _read_json(request: Request) -> Any:
    raw = await request.body()
    if not raw.strip():
        return {}
    return json.loads(raw)


def _parse_chat_request(payload: Any) -> ChatRequest:
    message = payload.get("message") if isinstance(payload, dict) else None
    if not isinstance(message, str) or not message:
        raise InvalidInputError("Message is required")
    return ChatRequest.model_validate(payload)


@router.get("/suggestions", response_model=SuggestionsResponse)
def suggestions_endpoint(
    suggestion_service: SuggestionService = Depends(get_suggestion_service),
) -> SuggestionsResponse:
    return SuggestionsResponse(suggestions=suggestion_service.pick())


@router.post("/chat", response_model=ChatResponse, response_model_exclude_none=True)
async def chat_endpoint(
    request: Request,
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    try:
        chat_request = _parse_chat_request(await _read_json(request))
        return await chat_service.reply(
            message=chat_request.message,
            conversation=chat_request.conversation,
        )
    except ChatRelayError:
        raise
    except Exception as e:
        logger.exception("Chat endpoint failed")
        raise InternalError() from e


@router.post("/regenerate", response_model=RegenerateResponse)
async def regenerate_endpoint(request: Request) -> RegenerateResponse:
    try:
        payload = await _read_json(request)
    except ValueError:
        logger.warning("Regenerate called with a malformed body")
        payload = {}

    if not isinstance(payload, dict):
        payload = {}
    last_message = RegenerateRequest.model_validate(payload).last_message

    if last_message is None:
        text = ""
    elif isinstance(last_message, str):
        text = last_message
    else:
        text = json.dumps(last_message)
    return RegenerateResponse(response=REPHRASE_PREFIX + text, timestamp=utc_now_iso())
