"""
Pokémon endpoints.

All routes require a session token.  The owner of a record is always
taken from the token, never from the request body.
"""

from typing import List

from fastapi import APIRouter, Depends

from pokemon_adoption_api.app.core.security import get_current_user
from pokemon_adoption_api.app.schemas.pokemon import PokemonCreate, PokemonRead
from pokemon_adoption_api.app.services.pokemon_service import PokemonService

router = APIRouter()


@router.get("/user/pokemon", response_model=List[PokemonRead])
async def list_my_pokemon(current_user: dict = Depends(get_current_user)) -> List[PokemonRead]:
    """Return every Pokémon adopted by the caller."""
    return await PokemonService.list_owned(current_user["user_id"])


@router.post("/pokemon/adopt", response_model=PokemonRead)
async def adopt_pokemon(
    pokemon: PokemonCreate,
    current_user: dict = Depends(get_current_user),
) -> PokemonRead:
    """Adopt a Pokémon.  It starts at full health and belongs to the caller."""
    return await PokemonService.adopt(current_user["user_id"], pokemon)


@router.post("/pokemon/feed/{pokemon_id}", response_model=PokemonRead)
async def feed_pokemon(
    pokemon_id: str,
    current_user: dict = Depends(get_current_user),
) -> PokemonRead:
    """Feed a Pokémon: +20 health, capped at 100, and refresh ``lastFed``."""
    return await PokemonService.feed(current_user["user_id"], pokemon_id)
