"""Shared fixtures: a fresh application and test client per test."""

import pytest
from fastapi.testclient import TestClient

from social_media_api.app.core.config import Settings
from social_media_api.app.main import create_app


TEST_SECRET = "test-secret"


@pytest.fixture
def settings():
    return Settings(
        secret_key=TEST_SECRET,
        password_hash_iterations=1000,
        seed_demo_data=False,
        log_level="WARNING",
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def seeded_client(settings):
    settings.seed_demo_data = True
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def alice():
    return {"username": "alice", "email": "alice@example.com", "password": "wonderland"}


@pytest.fixture
def alice_token(client, alice):
    resp = client.post("/api/auth/register", json=alice)
    assert resp.status_code == 201
    return resp.json()["token"]


@pytest.fixture
def auth_headers(alice_token):
    return {"Authorization": f"Bearer {alice_token}"}
