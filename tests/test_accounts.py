"""Registration and login over HTTP."""

import asyncio

import pytest

from pokemon_adoption_api.app.core.db import get_cursor
from pokemon_adoption_api.app.core.errors import NotFoundError
from pokemon_adoption_api.app.core.security import decode_access_token
from pokemon_adoption_api.app.services.user_service import UserService

from conftest import PASSWORD, register


def test_register_returns_token_and_public_profile(client):
    resp = register(client)
    assert resp.status_code == 200
    body = resp.json()
    assert body["user"] == {"name": "Ash", "email": "a@x.com", "dateOfBirth": "1997-04-01"}
    assert "password" not in body["user"]
    assert decode_access_token(body["token"])["email"] == "a@x.com"


def test_register_stores_hash_not_plaintext(client):
    register(client)
    with get_cursor() as cursor:
        row = cursor.execute("SELECT password FROM users WHERE email = ?", ("a@x.com",)).fetchone()
    assert row["password"] != PASSWORD
    assert PASSWORD not in row["password"]


def test_register_accepts_dob_alias(client):
    resp = client.post(
        "/api/register",
        json={"name": "Misty", "dob": "1998-05-02", "email": "m@x.com", "password": PASSWORD},
    )
    assert resp.status_code == 200
    assert resp.json()["user"]["dateOfBirth"] == "1998-05-02"


def test_register_lists_every_invalid_field(client):
    resp = client.post("/api/register", json={"name": "  ", "email": "not-an-email", "password": "123"})
    assert resp.status_code == 400
    body = resp.json()
    assert body["code"] == "VALIDATION_ERROR"
    fields = {e["field"] for e in body["errors"]}
    assert {"name", "email", "password"} <= fields
    assert len(body["errors"]) == 4


def test_register_rejects_short_password(client):
    resp = register(client, password="12345")
    assert resp.status_code == 400
    assert [e["field"] for e in resp.json()["errors"]] == ["password"]


def test_register_twice_with_same_email_conflicts(client):
    assert register(client).status_code == 200
    resp = register(client, name="Impostor", password="another1")
    assert resp.status_code == 409
    assert resp.json()["code"] == "CONFLICT"

    # The first account is unchanged.
    login = client.post("/api/login", json={"email": "a@x.com", "password": PASSWORD})
    assert login.status_code == 200
    assert login.json()["user"]["name"] == "Ash"
    bad = client.post("/api/login", json={"email": "a@x.com", "password": "another1"})
    assert bad.status_code == 400
    with get_cursor() as cursor:
        count = cursor.execute("SELECT COUNT(*) AS n FROM users").fetchone()["n"]
    assert count == 1


def test_login_returns_fresh_token(client):
    register(client)
    resp = client.post("/api/login", json={"email": "a@x.com", "password": PASSWORD})
    assert resp.status_code == 200
    body = resp.json()
    assert body["user"] == {"name": "Ash", "email": "a@x.com", "dateOfBirth": "1997-04-01"}
    assert decode_access_token(body["token"]) is not None


def test_login_does_not_reveal_which_accounts_exist(client):
    register(client)
    wrong_password = client.post("/api/login", json={"email": "a@x.com", "password": "wrong-pass"})
    unknown_user = client.post("/api/login", json={"email": "nobody@x.com", "password": PASSWORD})
    assert wrong_password.status_code == unknown_user.status_code == 400
    assert wrong_password.json() == unknown_user.json()
    assert wrong_password.json()["error"] == "Invalid credentials"


def test_login_validates_input(client):
    resp = client.post("/api/login", json={"email": "bad", "password": ""})
    assert resp.status_code == 400
    assert {e["field"] for e in resp.json()["errors"]} == {"email", "password"}


def test_issue_token_for_existing_account(client):
    register(client)
    token = asyncio.run(UserService.issue_token_for("a@x.com"))
    resp = client.get("/api/user/pokemon", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200


def test_issue_token_for_unknown_account(client):
    with pytest.raises(NotFoundError):
        asyncio.run(UserService.issue_token_for("nobody@x.com"))
