"""
Security helpers for password hashing and JWT authentication.

This module implements a lightweight JSON Web Token (JWT) mechanism
using HMAC‑SHA256 signatures and base64url encoding.  Tokens embed
the caller's identity (``sub`` is the user id, ``email`` the login)
and an expiration timestamp (``exp``).  A secret key from the
application settings is used to sign and verify the token.  Passwords
are hashed with PBKDF2‑HMAC‑SHA256 and a random per‑password salt.

Clients send the token in the ``Authorization`` header.  The
documented form is ``Bearer <token>``; a bare token is accepted as
well because the web client historically sent it that way.
"""

import base64
import hashlib
import hmac
import json
import logging
import os
import time
from typing import Any, Dict, Optional

from fastapi import Depends, Request, status
from fastapi.security import APIKeyHeader

from .config import settings
from .errors import AuthError

logger = logging.getLogger(__name__)

PBKDF2_ITERATIONS = 100_000
BEARER_SCHEME = "bearer"


def _b64_url_encode(data: bytes) -> str:
    """Base64‑url encode bytes without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("utf-8")


def _b64_url_decode(data: str) -> bytes:
    """Decode base64‑url encoded string, adding padding if necessary."""
    padding = '=' * (-len(data) % 4)
    return base64.urlsafe_b64decode(data + padding)


def _sign(message: bytes, secret: str) -> bytes:
    """Compute HMAC‑SHA256 signature of a message using the given secret."""
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).digest()


def create_access_token(data: Dict[str, Any], expires_delta: Optional[int] = None) -> str:
    """Create a signed JWT token with the given payload.

    The payload is extended with ``iat`` and ``exp`` fields holding
    UNIX timestamps.  A standard header with algorithm HS256 is used.
    The token is a string of the form ``header.payload.signature``,
    where each part is base64url encoded.

    Parameters
    ----------
    data : dict
        Claims to embed in the token (e.g. ``{"sub": "<user id>"}``).
    expires_delta : Optional[int]
        Lifetime of the token in seconds.  Defaults to
        ``settings.access_token_expire_minutes * 60`` (one hour).

    Returns
    -------
    str
        A signed JWT token.
    """
    to_encode = data.copy()
    exp_seconds = expires_delta if expires_delta is not None else settings.access_token_expire_minutes * 60
    now = int(time.time())
    to_encode["iat"] = now
    to_encode["exp"] = now + exp_seconds
    header = {"alg": settings.algorithm, "typ": "JWT"}
    header_b64 = _b64_url_encode(json.dumps(header, separators=(',', ':')).encode("utf-8"))
    payload_b64 = _b64_url_encode(json.dumps(to_encode, separators=(',', ':')).encode("utf-8"))
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    signature_b64 = _b64_url_encode(_sign(signing_input, settings.secret_key))
    return f"{header_b64}.{payload_b64}.{signature_b64}"


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Verify and decode a JWT token.

    Splits the token into header, payload and signature, verifies the
    HMAC signature and checks the ``exp`` field.  If validation
    succeeds, returns the payload dictionary; otherwise returns
    ``None``.
    """
    parts = token.split('.')
    if len(parts) != 3:
        return None
    header_b64, payload_b64, signature_b64 = parts
    signing_input = f"{header_b64}.{payload_b64}".encode("utf-8")
    expected_sig = _sign(signing_input, settings.secret_key)
    try:
        actual_sig = _b64_url_decode(signature_b64)
    except ValueError:
        return None
    # Constant‑time comparison to prevent timing attacks
    if not hmac.compare_digest(expected_sig, actual_sig):
        return None
    try:
        data = json.loads(_b64_url_decode(payload_b64).decode("utf-8"))
    except ValueError:
        return None
    if not isinstance(data, dict):
        return None
    exp = data.get("exp")
    if not isinstance(exp, (int, float)) or int(exp) <= int(time.time()):
        return None
    return data


def extract_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token carried by an ``Authorization`` header value.

    Both ``Bearer <token>`` and a bare ``<token>`` are accepted.  Returns
    ``None`` when the header is absent or empty.
    """
    if not authorization:
        return None
    value = authorization.strip()
    scheme, _, rest = value.partition(" ")
    if scheme.lower() == BEARER_SCHEME:
        value = rest.strip()
    return value or None


authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


def get_current_user(
    request: Request,
    authorization: Optional[str] = Depends(authorization_header),
) -> Dict[str, Any]:
    """Dependency that retrieves the current authenticated user.

    Raises ``AuthError`` (403) when no token is presented and
    ``AuthError`` (401) when the token is malformed, badly signed,
    expired or names a user that does not exist.  On success the
    caller identity is stored on ``request.state.user_id`` and
    returned as ``{"user_id", "email"}``.
    """
    token = extract_token(authorization)
    if token is None:
        raise AuthError("missing token", http_status=status.HTTP_403_FORBIDDEN)
    payload = decode_access_token(token)
    if not payload or not payload.get("sub"):
        raise AuthError("invalid or expired token")

    from pokemon_adoption_api.app.core.db import get_cursor
    with get_cursor() as cursor:
        row = cursor.execute(
            "SELECT id, email FROM users WHERE id = ?",
            (payload["sub"],),
        ).fetchone()
    if not row:
        logger.warning("Token subject %s no longer exists", payload["sub"])
        raise AuthError("invalid or expired token")

    request.state.user_id = row["id"]
    return {"user_id": row["id"], "email": row["email"]}


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.  The
    resulting string contains the salt and hash separated by a
    ``$`` (salt in hex, then hash in hex).
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac('sha256', password.encode('utf-8'), salt, PBKDF2_ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored salt+hash string.

    Returns ``False`` for a malformed stored value instead of raising.
    """
    try:
        salt_hex, hash_hex = hashed_password.split('$', 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac('sha256', plain_password.encode('utf-8'), salt, PBKDF2_ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
