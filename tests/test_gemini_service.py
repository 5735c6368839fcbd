import pytest
from google.genai import types

from chat_relay.core.settings import Settings
from chat_relay.models.chat import ChatTurn
from chat_relay.services.gemini_service import GeminiService, build_contents, extract_reply_text


def test_build_contents_appends_user_message_last():
    contents = build_contents(
        "next",
        [ChatTurn(role="user", content="a"), ChatTurn(role="assistant", content=None)],
    )
    assert [c.role for c in contents] == ["user", "model", "user"]
    assert [c.parts[0].text for c in contents] == ["a", "", "next"]


def test_extract_reply_text_requires_candidates():
    with pytest.raises(ValueError):
        extract_reply_text(types.GenerateContentResponse(candidates=[]))


def test_extract_reply_text_uses_first_part():
    response = types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(
                    role="model",
                    parts=[types.Part(text="first"), types.Part(text="second")],
                )
            )
        ]
    )
    assert extract_reply_text(response) == "first"


def test_service_requires_key_without_client():
    with pytest.raises(RuntimeError):
        GeminiService(settings=Settings(GEMINI_API_KEY=None, _env_file=None))


def test_chat_turn_is_immutable():
    turn = ChatTurn(role="user", content="hi")
    with pytest.raises(Exception):
        turn.content = "changed"


def test_build_contents_encodes_non_string_content():
    contents = build_contents(
        "next",
        [
            ChatTurn(role="user", content={"a": 1}),
            ChatTurn(role=["odd"], content=0),
        ],
    )
    assert [c.role for c in contents] == ["user", "user", "user"]
    assert [c.parts[0].text for c in contents] == ['{"a": 1}', "", "next"]
