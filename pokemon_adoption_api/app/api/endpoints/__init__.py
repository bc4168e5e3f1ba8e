"""
Endpoint modules.

Each module exposes a ``router`` that is included by
``pokemon_adoption_api.app.api.router``.
"""
