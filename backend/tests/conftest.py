"""Shared fixtures: fresh stores, identity provider and an API client."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from services.identity import IdentityProvider
from services.record_store import InMemoryRecordStore, load_seed

SEED_FILE = Path(__file__).resolve().parent.parent / "data" / "seed.yaml"
TEST_SECRET = "test-secret"
PASSWORD = "correct-horse"


@pytest.fixture
def store():
    return InMemoryRecordStore()


@pytest.fixture
def seeded_store():
    s = InMemoryRecordStore()
    load_seed(s, SEED_FILE)
    return s


@pytest.fixture
def identity_provider(seeded_store):
    return IdentityProvider(seeded_store, TEST_SECRET, ttl_minutes=60)


@pytest.fixture
def client(seeded_store, identity_provider):
    from api.router import limiter
    from main import create_app

    limiter.reset()
    app = create_app(store=seeded_store, identity_provider=identity_provider)
    return TestClient(app)


@pytest.fixture
def auth_headers(client):
    """Factory: sign up a user with ``role`` and return bearer headers."""
    created = 0

    def _make(role: str, name: str = "Test User") -> dict[str, str]:
        nonlocal created
        created += 1
        email = f"{role}{created}@example.com"
        resp = client.post(
            "/auth/signup",
            json={"email": email, "password": PASSWORD, "name": name, "role": role},
        )
        assert resp.status_code == 201, resp.text
        resp = client.post("/auth/signin", json={"email": email, "password": PASSWORD})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['access_token']}"}

    return _make
