"""Shared fixtures: a fresh SQLite database and API client per test."""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient

from pokemon_adoption_api.app.core.config import settings
from pokemon_adoption_api.app.core.db import init_db
from pokemon_adoption_api.app.main import app

PASSWORD = "secret1"


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "pokemon_test.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def client(db_path):
    with TestClient(app) as c:
        yield c


def register(client, email="a@x.com", password=PASSWORD, name="Ash", dob="1997-04-01"):
    return client.post(
        "/api/register",
        json={"name": name, "dateOfBirth": dob, "email": email, "password": password},
    )


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def token(client):
    resp = register(client)
    assert resp.status_code == 200
    return resp.json()["token"]


@pytest.fixture
def other_token(client):
    resp = register(client, email="b@x.com", name="Gary")
    assert resp.status_code == 200
    return resp.json()["token"]
