import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from chat_relay.api import chat, health
from chat_relay.core.errors import register_exception_handlers
from chat_relay.core.logging import configure_logging
from chat_relay.core.settings import get_settings

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings)

    app = FastAPI(title=settings.app_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(chat.router, prefix="/api")

    app.include_router(health.router)

    if settings.gemini_enabled:
        logger.info("Mode: Gemini API enabled (model=%s)", settings.gemini_model)
    else:
        logger.info("Mode: Local mode")

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
