"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Accounts (registration, login, session tokens) and the
adopted Pokémon each have their own service in ``services`` and a
router in ``api/endpoints``.
"""

from .main import app  # noqa: F401
