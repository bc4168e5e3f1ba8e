"""Entry point for the Pokémon Adoption API.

Starts the FastAPI application with Uvicorn.  Host and port come from
the ``HOST`` and ``PORT`` environment variables (defaults ``0.0.0.0``
and ``5000``); see ``pokemon_adoption_api.app.core.config`` for the
other supported variables.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from pokemon_adoption_api.app.core.config import settings
from pokemon_adoption_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
