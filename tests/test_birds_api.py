"""Tests for the /api/birds endpoints against a SQLite store."""

import pytest

SEEDED = [
    ("Blue Jay", "Beautiful Blue Jay with vibrant colors", 1999.99, "./images/blue-jay.jpg"),
    ("Owl", "Majestic owl with keen eyesight", 1499.99, "./images/owl.jpg"),
    ("Parrot", "Colorful talking parrot", 1299.99, "./images/parrot.jpg"),
    ("Parakeet", "Colorful and playful Budgerigar", 49.99, "./images/Parakeet.jpg"),
    ("Cockatiel", "Sweet and gentle Cockatiel", 79.99, "./images/Cockatiel.jpg"),
    ("Canary", "Melodious Yellow Canary", 39.99, "./images/canary.jpg"),
]

NEW_BIRD = {
    "name": "Finch",
    "description": "Tiny zebra finch",
    "price": 24.5,
    "imagePath": "./images/finch.jpg",
}


class TestListBirds:

    def test_returns_seeded_birds(self, client):
        response = client.get("/api/birds")

        assert response.status_code == 200
        birds = response.json()
        assert len(birds) == 6
        got = [(b["name"], b["description"], b["price"], b["imagePath"]) for b in birds]
        assert got == SEEDED

    def test_seeded_birds_have_distinct_ids(self, client):
        ids = [b["id"] for b in client.get("/api/birds").json()]

        assert None not in ids
        assert len(set(ids)) == len(ids)

    def test_serializes_all_five_fields(self, client):
        bird = client.get("/api/birds").json()[0]

        assert set(bird) == {"id", "name", "description", "price", "imagePath"}

    def test_empty_store_returns_empty_list(self, empty_client):
        response = empty_client.get("/api/birds")

        assert response.status_code == 200
        assert response.json() == []


class TestCreateBird:

    def test_returns_submitted_fields_with_new_id(self, empty_client):
        response = empty_client.post("/api/birds", json=NEW_BIRD)

        assert response.status_code == 201
        body = response.json()
        assert body["id"] is not None
        for key, value in NEW_BIRD.items():
            assert body[key] == value

    def test_created_bird_is_listed(self, client):
        created = client.post("/api/birds", json=NEW_BIRD).json()

        birds = client.get("/api/birds").json()

        assert len(birds) == 7
        assert created in birds

    def test_assigns_fresh_ids(self, client):
        existing = {b["id"] for b in client.get("/api/birds").json()}

        first = client.post("/api/birds", json=NEW_BIRD).json()["id"]
        second = client.post("/api/birds", json=NEW_BIRD).json()["id"]

        assert first not in existing
        assert second not in existing
        assert first != second

    def test_client_id_does_not_override_existing_bird(self, client):
        before = client.get("/api/birds").json()
        target = before[0]

        response = client.post("/api/birds", json={**NEW_BIRD, "id": target["id"]})

        assert response.status_code == 201
        assert response.json()["id"] != target["id"]
        after = client.get("/api/birds").json()
        assert after[0] == target
        assert len(after) == len(before) + 1

    def test_client_id_is_ignored_on_empty_store(self, empty_client):
        response = empty_client.post("/api/birds", json={**NEW_BIRD, "id": 999})

        assert response.status_code == 201
        assert response.json()["id"] != 999

    def test_null_id_is_accepted(self, empty_client):
        response = empty_client.post("/api/birds", json={**NEW_BIRD, "id": None})

        assert response.status_code == 201
        assert response.json()["id"] is not None

    @pytest.mark.parametrize(
        "payload",
        [
            {**NEW_BIRD, "price": "not-a-number"},
            {**NEW_BIRD, "price": -1},
            {k: v for k, v in NEW_BIRD.items() if k != "name"},
            {k: v for k, v in NEW_BIRD.items() if k != "imagePath"},
            {**NEW_BIRD, "name": ""},
            {**NEW_BIRD, "name": "   "},
            {**NEW_BIRD, "price": 24.555},
            {**NEW_BIRD, "price": 100_000_000},
            {**NEW_BIRD, "imagePath": "./images/" + "a" * 520},
        ],
    )
    def test_invalid_payload_is_rejected(self, client, payload):
        response = client.post("/api/birds", json=payload)

        assert response.status_code == 422
        assert len(client.get("/api/birds").json()) == 6

    @pytest.mark.parametrize("token", [b"Infinity", b"-Infinity", b"NaN"])
    def test_non_finite_price_is_rejected(self, client, token):
        body = b'{"name": "Finch", "description": "d", "price": ' + token + b', "imagePath": "p"}'

        response = client.post("/api/birds", content=body, headers={"Content-Type": "application/json"})

        assert response.status_code == 422
        assert len(client.get("/api/birds").json()) == 6

    def test_price_at_column_limit_is_accepted(self, empty_client):
        response = empty_client.post("/api/birds", json={**NEW_BIRD, "price": 99_999_999.99})

        assert response.status_code == 201
        assert response.json()["price"] == 99_999_999.99

    def test_malformed_json_is_rejected(self, client):
        response = client.post(
            "/api/birds",
            content=b'{"name": "Finch", "price": ',
            headers={"Content-Type": "application/json"},
        )

        assert 400 <= response.status_code < 500
        assert len(client.get("/api/birds").json()) == 6


def test_health_check(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": "1.0.0"}
