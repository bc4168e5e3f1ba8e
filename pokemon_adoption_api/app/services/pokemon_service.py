"""
Business logic for adopted Pokémon.

Every record belongs to exactly one user (``owner_id``).  Records are
created by adoption and changed only by feeding, which raises
``health_status`` by ``FEED_AMOUNT`` up to ``MAX_HEALTH``.  Feeding is
a single ``UPDATE`` statement so that concurrent feeds of the same
record cannot overwrite each other.
"""

import logging
import sqlite3
import uuid
from datetime import datetime, timezone
from typing import List

from fastapi import status

from ..core.config import settings
from ..core.db import get_cursor
from ..core.errors import AuthError, InternalError, NotFoundError
from ..schemas.pokemon import PokemonCreate, PokemonRead

logger = logging.getLogger(__name__)

FEED_AMOUNT = 20
MAX_HEALTH = 100
DEFAULT_HEALTH = 100

_COLUMNS = "id, name, breed, age, health_status, last_fed, owner_id"


def _row_to_pokemon(row: sqlite3.Row) -> PokemonRead:
    return PokemonRead(
        id=row["id"],
        name=row["name"],
        breed=row["breed"],
        age=row["age"],
        healthStatus=row["health_status"],
        lastFed=datetime.fromisoformat(row["last_fed"]),
        owner=row["owner_id"],
    )


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class PokemonService:
    """Listing, adoption and feeding of Pokémon records."""

    @classmethod
    async def list_owned(cls, owner_id: str) -> List[PokemonRead]:
        """Return every Pokémon owned by ``owner_id`` in store order."""
        try:
            with get_cursor() as cursor:
                rows = cursor.execute(
                    f"SELECT {_COLUMNS} FROM pokemon WHERE owner_id = ? ORDER BY rowid",
                    (owner_id,),
                ).fetchall()
        except sqlite3.Error:
            logger.exception("Fetching Pokémon of user %s failed", owner_id)
            raise InternalError("Failed to fetch Pokémon")
        return [_row_to_pokemon(row) for row in rows]

    @classmethod
    async def adopt(cls, owner_id: str, data: PokemonCreate) -> PokemonRead:
        """Create a Pokémon owned by ``owner_id`` with full health.

        The owner always comes from the authenticated caller.  Adopting
        the same name and breed twice creates two distinct records.
        """
        logger.info("User %s is adopting %s (%s, age %d)", owner_id, data.name, data.breed, data.age)
        pokemon_id = uuid.uuid4().hex
        try:
            with get_cursor() as cursor:
                cursor.execute(
                    f"INSERT INTO pokemon ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
                    (pokemon_id, data.name, data.breed, data.age, DEFAULT_HEALTH, _now(), owner_id),
                )
                row = cursor.execute(
                    f"SELECT {_COLUMNS} FROM pokemon WHERE id = ?", (pokemon_id,)
                ).fetchone()
        except sqlite3.Error:
            logger.exception("Adoption by user %s failed", owner_id)
            raise InternalError("Failed to adopt Pokémon")
        logger.info("Pokémon %s adopted by user %s", pokemon_id, owner_id)
        return _row_to_pokemon(row)

    @classmethod
    async def feed(cls, caller_id: str, pokemon_id: str) -> PokemonRead:
        """Feed a Pokémon and return the updated record.

        Raises ``NotFoundError`` for an unknown id.  When
        ``settings.enforce_feed_ownership`` is on, feeding somebody
        else's Pokémon raises ``AuthError`` (403).  Health is raised by
        ``FEED_AMOUNT`` and capped at ``MAX_HEALTH``; ``lastFed`` is
        always refreshed.
        """
        try:
            with get_cursor() as cursor:
                row = cursor.execute(
                    "SELECT owner_id FROM pokemon WHERE id = ?", (pokemon_id,)
                ).fetchone()
                if not row:
                    raise NotFoundError("Pokémon not found")
                if settings.enforce_feed_ownership and row["owner_id"] != caller_id:
                    logger.warning("User %s tried to feed Pokémon %s owned by %s", caller_id, pokemon_id, row["owner_id"])
                    raise AuthError("not the owner of this pokemon", http_status=status.HTTP_403_FORBIDDEN)
                # Owner never changes, so only the increment needs to be atomic.
                cursor.execute(
                    "UPDATE pokemon SET health_status = MIN(health_status + ?, ?), last_fed = ? WHERE id = ?",
                    (FEED_AMOUNT, MAX_HEALTH, _now(), pokemon_id),
                )
                updated = cursor.execute(
                    f"SELECT {_COLUMNS} FROM pokemon WHERE id = ?", (pokemon_id,)
                ).fetchone()
        except sqlite3.Error:
            logger.exception("Feeding Pokémon %s failed", pokemon_id)
            raise InternalError("Failed to feed Pokémon")
        logger.info("Pokémon %s fed by user %s, health now %d", pokemon_id, caller_id, updated["health_status"])
        return _row_to_pokemon(updated)
