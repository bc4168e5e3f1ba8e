"""Token signing, header parsing and password hashing."""

import time
from types import SimpleNamespace

from pokemon_adoption_api.app.core import security
from pokemon_adoption_api.app.core.security import (
    create_access_token,
    decode_access_token,
    extract_token,
    hash_password,
    verify_password,
)


def test_token_carries_identity_and_one_hour_expiry():
    before = int(time.time())
    payload = decode_access_token(create_access_token({"sub": "u1", "email": "a@x.com"}))
    assert payload["sub"] == "u1"
    assert payload["email"] == "a@x.com"
    assert before + 3600 <= payload["exp"] <= int(time.time()) + 3600


def test_token_older_than_one_hour_is_rejected(monkeypatch):
    issued = time.time() - 3601
    with monkeypatch.context() as m:
        m.setattr(security, "time", SimpleNamespace(time=lambda: issued))
        token = create_access_token({"sub": "u1"})
    assert decode_access_token(token) is None


def test_tampered_payload_is_rejected():
    header, _, signature = create_access_token({"sub": "u1"}).split(".")
    forged_payload = security._b64_url_encode(b'{"sub":"u2","exp":9999999999}')
    assert decode_access_token(f"{header}.{forged_payload}.{signature}") is None


def test_token_signed_with_other_key_is_rejected(monkeypatch):
    with monkeypatch.context() as m:
        m.setattr(security.settings, "secret_key", "another-key")
        token = create_access_token({"sub": "u1"})
    assert decode_access_token(token) is None


def test_garbage_tokens_are_rejected():
    assert decode_access_token("not-a-token") is None
    assert decode_access_token("a.b.c") is None
    assert decode_access_token("") is None


def test_extract_token_accepts_bearer_and_raw():
    assert extract_token("Bearer abc.def.ghi") == "abc.def.ghi"
    assert extract_token("bearer abc.def.ghi") == "abc.def.ghi"
    assert extract_token("abc.def.ghi") == "abc.def.ghi"
    assert extract_token("  abc  ") == "abc"


def test_extract_token_empty_header():
    assert extract_token(None) is None
    assert extract_token("") is None
    assert extract_token("Bearer ") is None


def test_password_hash_is_salted_and_verifiable():
    first = hash_password("secret1")
    second = hash_password("secret1")
    assert first != second
    assert "secret1" not in first
    assert verify_password("secret1", first)
    assert verify_password("secret1", second)
    assert not verify_password("secret2", first)


def test_malformed_stored_hash_never_matches():
    assert not verify_password("secret1", "no-dollar-sign")
    assert not verify_password("secret1", "zz$zz")
