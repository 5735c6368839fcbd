from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter


class ChatTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Any = None  # "user" or "assistant"
    content: Any = None


class ChatRequest(BaseModel):
    message: StrictStr = Field(min_length=1)
    # Left unparsed until a Gemini call needs it; local replies never read it.
    conversation: Any = None


_CONVERSATION_ADAPTER = TypeAdapter(list[ChatTurn])


def parse_conversation(raw: Any) -> list[ChatTurn]:
    if raw is None:
        return []
    return _CONVERSATION_ADAPTER.validate_python(raw)


class ChatResponse(BaseModel):
    success: bool = True
    source: Literal["gemini", "local"] | None = None
    response: str
    timestamp: str


class RegenerateRequest(BaseModel):
    """Body of a regenerate call; ``lastMessage`` is echoed back as-is."""

    last_message: Any = Field(default=None, alias="lastMessage")


class RegenerateResponse(BaseModel):
    success: bool = True
    response: str
    timestamp: str


class SuggestionsResponse(BaseModel):
    success: bool = True
    suggestions: list[str]


class HealthResponse(BaseModel):
    status: str
    service: str
    timestamp: str
