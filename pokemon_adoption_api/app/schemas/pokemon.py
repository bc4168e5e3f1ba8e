"""
Pydantic models for Pokémon records.

``PokemonCreate`` is the adoption request.  Only ``name``, ``breed``
and ``age`` are read from it; anything else the client sends (an
``owner``, a ``healthStatus``) is ignored.  ``PokemonRead`` is the
stored record returned by every Pokémon endpoint.
"""

from datetime import datetime

from pydantic import BaseModel, Field, constr

# Keeps ages far inside SQLite's 64-bit INTEGER range.
MAX_AGE = 1000


class PokemonCreate(BaseModel):
    """Schema for adopting a Pokémon."""

    name: constr(strip_whitespace=True, min_length=1) = Field(..., example="Pikachu")
    breed: constr(strip_whitespace=True, min_length=1) = Field(..., example="Electric")
    age: int = Field(..., ge=0, le=MAX_AGE, example=2)

    model_config = {"extra": "ignore"}


class PokemonRead(BaseModel):
    """Schema for reading a Pokémon record from the API."""

    id: str
    name: str
    breed: str
    age: int
    healthStatus: int = Field(..., ge=0, le=100)
    lastFed: datetime
    owner: str

    model_config = {
        "from_attributes": True,
    }
