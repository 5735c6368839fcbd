import pytest
from fastapi.testclient import TestClient

from chat_relay.core.settings import Settings, get_settings
from chat_relay.dependencies import get_chat_service
from chat_relay.main import create_app
from chat_relay.services.chat_service import ChatService
from chat_relay.services.local_service import LocalResponseService


@pytest.fixture
def local_settings() -> Settings:
    return Settings(GEMINI_API_KEY=None, _env_file=None)


@pytest.fixture
def local_client(local_settings):
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: local_settings
    app.dependency_overrides[get_chat_service] = lambda: ChatService(
        gemini_service=None,
        local_service=LocalResponseService(),
    )
    return TestClient(app)
