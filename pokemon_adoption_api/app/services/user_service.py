"""
Business logic for accounts.

``UserService`` registers users, checks credentials and issues session
tokens.  Passwords are stored as salted PBKDF2 hashes only.  Users are
never updated or deleted through the API.
"""

import logging
import sqlite3
import uuid
from datetime import date
from typing import Optional

from fastapi import status

from ..core.db import get_cursor
from ..core.errors import AuthError, ConflictError, InternalError, NotFoundError
from ..core.security import create_access_token, hash_password, verify_password
from ..schemas.user import AuthResponse, UserCreate, UserLogin, UserRead

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


def _issue_token(user_id: str, email: str) -> str:
    return create_access_token({"sub": user_id, "email": email})


def _row_to_profile(row: sqlite3.Row) -> UserRead:
    return UserRead(
        name=row["name"],
        email=row["email"],
        dateOfBirth=date.fromisoformat(row["date_of_birth"]),
    )


class UserService:
    """Registration, login and user lookups backed by the ``users`` table."""

    @classmethod
    async def register(cls, data: UserCreate) -> AuthResponse:
        """Create a new user and return a session token with the profile.

        Raises ``ConflictError`` if the email is already registered.  The
        existing account is left untouched in that case.
        """
        logger.info("Registering user %s", data.email)
        user_id = uuid.uuid4().hex
        hashed = hash_password(data.password)
        try:
            with get_cursor() as cursor:
                cursor.execute(
                    "INSERT INTO users (id, name, date_of_birth, email, password) VALUES (?, ?, ?, ?, ?)",
                    (user_id, data.name, data.dateOfBirth.isoformat(), data.email, hashed),
                )
        except sqlite3.IntegrityError:
            logger.info("Registration rejected, email %s already exists", data.email)
            raise ConflictError("Email already registered")
        except sqlite3.Error:
            logger.exception("Registration of %s failed", data.email)
            raise InternalError("Registration failed")

        profile = UserRead(name=data.name, email=data.email, dateOfBirth=data.dateOfBirth)
        return AuthResponse(token=_issue_token(user_id, data.email), user=profile)

    @classmethod
    async def login(cls, data: UserLogin) -> AuthResponse:
        """Check credentials and return a fresh token with the profile.

        Unknown email and wrong password produce the same error so the
        response does not reveal which accounts exist.
        """
        try:
            with get_cursor() as cursor:
                row = cursor.execute(
                    "SELECT id, name, date_of_birth, email, password FROM users WHERE email = ?",
                    (data.email,),
                ).fetchone()
        except sqlite3.Error:
            logger.exception("Login lookup for %s failed", data.email)
            raise InternalError("Login failed")

        if not row or not verify_password(data.password, row["password"]):
            logger.info("Failed login for %s", data.email)
            raise AuthError(INVALID_CREDENTIALS, http_status=status.HTTP_400_BAD_REQUEST)

        logger.info("User %s logged in", row["email"])
        return AuthResponse(token=_issue_token(row["id"], row["email"]), user=_row_to_profile(row))

    @classmethod
    async def get_user_by_email(cls, email: str) -> Optional[dict]:
        """Return ``{"id", "email"}`` for an email, or ``None``."""
        with get_cursor() as cursor:
            row = cursor.execute(
                "SELECT id, email FROM users WHERE email = ?",
                (email,),
            ).fetchone()
        if not row:
            return None
        return {"id": row["id"], "email": row["email"]}

    @classmethod
    async def issue_token_for(cls, email: str) -> str:
        """Mint a session token for an existing account.

        Raises ``NotFoundError`` if no account uses ``email``.
        """
        user = await cls.get_user_by_email(email)
        if not user:
            raise NotFoundError(f"User {email} not found")
        return _issue_token(user["id"], user["email"])
