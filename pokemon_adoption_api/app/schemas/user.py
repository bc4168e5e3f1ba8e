"""
Pydantic models for account data.

``UserCreate`` and ``UserLogin`` validate request bodies; ``UserRead``
is the public profile returned to clients and never contains the
password.  Field names follow the web client's camelCase JSON.
"""

from datetime import date

from pydantic import AliasChoices, BaseModel, EmailStr, Field, constr


class UserRead(BaseModel):
    """Public profile returned by register and login."""

    name: str = Field(..., example="Ash Ketchum")
    email: EmailStr = Field(..., example="ash@example.com")
    dateOfBirth: date = Field(..., example="1997-04-01")


class UserCreate(BaseModel):
    """Schema for registering a user.

    ``dateOfBirth`` may also be sent as ``dob``.  A password shorter
    than six characters is rejected.
    """

    name: constr(strip_whitespace=True, min_length=1) = Field(..., example="Ash Ketchum")
    dateOfBirth: date = Field(
        ...,
        validation_alias=AliasChoices("dateOfBirth", "dob"),
        example="1997-04-01",
    )
    email: EmailStr = Field(..., example="ash@example.com")
    password: str = Field(..., min_length=6, example="pikachu1")


class UserLogin(BaseModel):
    email: EmailStr = Field(..., example="ash@example.com")
    password: str = Field(..., min_length=1, example="pikachu1")


class AuthResponse(BaseModel):
    """Session token plus public profile."""

    token: str
    user: UserRead
