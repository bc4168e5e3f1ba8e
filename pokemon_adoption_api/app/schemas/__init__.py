"""
Pydantic schema definitions for API payloads.

Request and response bodies for accounts and Pokémon records live in
their own modules.  Schemas are separated from the storage layout so
that the JSON shape (camelCase, as the web client expects) does not
leak into SQL column names.
"""
