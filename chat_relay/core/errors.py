from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse


class ChatRelayError(Exception):
    """Base error carrying the HTTP status and the message shown to the caller."""

    status_code: int = 500

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"success": False}
        if self.source:
            body["source"] = self.source
        body["error"] = self.message
        return body


class InvalidInputError(ChatRelayError):
    status_code = 400


class UpstreamError(ChatRelayError):
    status_code = 502

    def __init__(self, message: str, source: str = "gemini") -> None:
        super().__init__(message, source=source)


class InternalError(ChatRelayError):
    status_code = 500

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)


async def chat_relay_error_handler(request: Request, exc: ChatRelayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ChatRelayError, chat_relay_error_handler)
