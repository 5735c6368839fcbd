from __future__ import annotations

import logging
import random
import re

from chat_relay.services.canned_responses import CANNED_RESPONSES, ResponseCategory

logger = logging.getLogger(__name__)


# Checked in order; the first pattern found anywhere in the message wins.
_KEYWORD_PATTERNS: tuple[tuple[re.Pattern[str], ResponseCategory], ...] = (
    (re.compile(r"hi|hello|hey"), ResponseCategory.GREETINGS),
    (re.compile(r"code|python|javascript"), ResponseCategory.CODING),
    (re.compile(r"story|poem|write"), ResponseCategory.CREATIVE),
)


def classify_message(message: str) -> ResponseCategory:
    lower = message.lower()

    for pattern, category in _KEYWORD_PATTERNS:
        if pattern.search(lower):
            return category

    if "?" in lower:
        return ResponseCategory.QUESTIONS
    return ResponseCategory.GENERAL


class LocalResponseService:
    """Answers chat messages from the canned response table, without any upstream call."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()

    def generate_chat_response(self, message: str) -> str:
        category = classify_message(message)
        logger.debug("Local reply category=%s", category.value)
        return self._rng.choice(CANNED_RESPONSES[category])
