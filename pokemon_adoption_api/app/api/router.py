"""
Top‑level API router.

Aggregates the account and Pokémon routers under the ``/api`` prefix
used by the web client.  The health check is mounted at the root by
``main``.
"""

from fastapi import APIRouter

from .endpoints import auth, pokemon

router = APIRouter()

router.include_router(auth.router, tags=["accounts"])
router.include_router(pokemon.router, tags=["pokemon"])
