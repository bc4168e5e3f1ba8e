"""
Top‑level package for the Pokémon Adoption API.

This file makes ``pokemon_adoption_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``pokemon_adoption_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
