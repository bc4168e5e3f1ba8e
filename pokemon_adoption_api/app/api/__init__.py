"""
API package.

``router`` aggregates the account, Pokémon and health routers; the
application mounts them in ``main``.  Global exception handlers live
in ``error_handlers``.
"""
