"""
Account endpoints.

Registration and login are the only routes that do not require a
session token.  Both answer with ``{"token", "user"}``.
"""

from fastapi import APIRouter

from pokemon_adoption_api.app.schemas.user import AuthResponse, UserCreate, UserLogin
from pokemon_adoption_api.app.services.user_service import UserService

router = APIRouter()


@router.post("/register", response_model=AuthResponse)
async def register_user(user: UserCreate) -> AuthResponse:
    """Register a new account and return a session token.

    Invalid fields produce a 400 listing every problem; an email that
    is already registered produces a 409.
    """
    return await UserService.register(user)


@router.post("/login", response_model=AuthResponse)
async def login_user(credentials: UserLogin) -> AuthResponse:
    """Authenticate with email and password and return a fresh token."""
    return await UserService.login(credentials)
