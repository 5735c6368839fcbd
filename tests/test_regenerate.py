def test_regenerate_echoes_last_message(local_client):
    r = local_client.post("/api/regenerate", json={"lastMessage": "foo"})
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["response"] == "Let me rephrase that:\n\nfoo"
    assert body["timestamp"].endswith("Z")


def test_regenerate_without_last_message(local_client):
    r = local_client.post("/api/regenerate", json={})
    assert r.status_code == 200
    assert r.json()["response"] == "Let me rephrase that:\n\n"


def test_regenerate_with_malformed_body(local_client):
    r = local_client.post(
        "/api/regenerate",
        content=b"{oops",
        headers={"content-type": "application/json"},
    )
    assert r.status_code == 200
    assert r.json()["success"] is True


def test_regenerate_reads_only_camel_case_key(local_client):
    r = local_client.post("/api/regenerate", json={"last_message": "snake"})
    assert r.status_code == 200
    assert r.json()["response"] == "Let me rephrase that:\n\n"


def test_regenerate_json_encodes_non_string_values(local_client):
    r = local_client.post("/api/regenerate", json={"lastMessage": True})
    assert r.json()["response"] == "Let me rephrase that:\n\ntrue"

    r = local_client.post("/api/regenerate", json={"lastMessage": 5})
    assert r.json()["response"] == "Let me rephrase that:\n\n5"
