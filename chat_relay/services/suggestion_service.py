from __future__ import annotations

import random
from typing import Sequence

from chat_relay.services.canned_responses import SUGGESTION_POOL

SUGGESTION_COUNT = 4


class SuggestionService:
    def __init__(
        self,
        pool: Sequence[str] = SUGGESTION_POOL,
        rng: random.Random | None = None,
    ) -> None:
        self._pool = tuple(pool)
        self._rng = rng or random.Random()

    def pick(self, count: int = SUGGESTION_COUNT) -> list[str]:
        return self._rng.sample(self._pool, k=min(count, len(self._pool)))
