import random

from chat_relay.services.canned_responses import SUGGESTION_POOL
from chat_relay.services.suggestion_service import SuggestionService


def test_suggestions_endpoint_returns_four_distinct_prompts(local_client):
    for _ in range(20):
        r = local_client.get("/api/suggestions")
        assert r.status_code == 200
        body = r.json()
        assert body["success"] is True
        assert len(body["suggestions"]) == 4
        assert len(set(body["suggestions"])) == 4
        assert set(body["suggestions"]) <= set(SUGGESTION_POOL)


def test_suggestions_cover_every_ordering_position():
    service = SuggestionService(rng=random.Random(1234))
    first_items = {service.pick()[0] for _ in range(200)}
    assert first_items == set(SUGGESTION_POOL)


def test_small_pool_returns_everything():
    service = SuggestionService(pool=["a", "b"])
    assert sorted(service.pick()) == ["a", "b"]
