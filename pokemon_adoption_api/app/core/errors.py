"""
Error hierarchy for the Pokémon Adoption API.

Services raise these exceptions; the handlers registered in
``api.error_handlers`` turn them into JSON responses.  Every error
carries a machine readable ``code``, a user facing ``message`` and
the HTTP status to answer with.
"""

from typing import Any, Dict, List, Optional

from fastapi import status


class PokemonApiError(Exception):
    """Base exception for all API errors."""

    code = "ERROR"
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, http_status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if http_status is not None:
            self.http_status = http_status

    def to_response(self) -> Dict[str, Any]:
        return {"error": self.message, "code": self.code}


class ValidationError(PokemonApiError):
    """Malformed or missing input.  Lists every violated field."""

    code = "VALIDATION_ERROR"
    http_status = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: List[Dict[str, str]], message: str = "Invalid request data"):
        super().__init__(message)
        self.errors = errors

    def to_response(self) -> Dict[str, Any]:
        return {"error": self.message, "code": self.code, "errors": self.errors}


class ConflictError(PokemonApiError):
    """A unique key (the account email) is already taken."""

    code = "CONFLICT"
    http_status = status.HTTP_409_CONFLICT


class AuthError(PokemonApiError):
    """Missing, invalid or expired token, bad credentials or foreign record.

    Defaults to 401; callers pass 403 for a missing token or a record
    owned by somebody else and 400 for failed logins.
    """

    code = "AUTH_ERROR"
    http_status = status.HTTP_401_UNAUTHORIZED


class NotFoundError(PokemonApiError):
    code = "NOT_FOUND"
    http_status = status.HTTP_404_NOT_FOUND


class InternalError(PokemonApiError):
    """Store or runtime failure.  The message never includes internals."""

    code = "INTERNAL_ERROR"
    http_status = status.HTTP_500_INTERNAL_SERVER_ERROR
