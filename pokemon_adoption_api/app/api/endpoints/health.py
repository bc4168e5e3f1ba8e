"""Liveness endpoint; checks that the store answers a query."""

import logging
import sqlite3

from fastapi import APIRouter

from pokemon_adoption_api.app.core.db import ping
from pokemon_adoption_api.app.core.errors import InternalError

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/health")
async def health() -> dict:
    try:
        ping()
    except sqlite3.Error:
        logger.exception("Database health check failed")
        raise InternalError("Database unavailable")
    return {"status": "ok"}
