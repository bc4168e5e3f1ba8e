"""
Global exception handlers.

* ``PokemonApiError`` -> its own status and ``{"error", "code"}`` body
* ``RequestValidationError`` -> 400 listing every invalid field
* anything else -> 500 without internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from pokemon_adoption_api.app.core.errors import InternalError, PokemonApiError, ValidationError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(PokemonApiError)
    async def api_error_handler(request: Request, exc: PokemonApiError) -> JSONResponse:
        level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
        logger.log(level, "%s on %s: %s", exc.code, request.url.path, exc.message)
        headers = None
        if exc.http_status == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        return JSONResponse(status_code=exc.http_status, content=exc.to_response(), headers=headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        error = ValidationError(_field_errors(exc))
        logger.warning("Validation error on %s: %s", request.url.path, error.errors)
        return JSONResponse(status_code=error.http_status, content=error.to_response())

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
        error = InternalError("An unexpected error occurred")
        return JSONResponse(status_code=error.http_status, content=error.to_response())


def _field_errors(exc: RequestValidationError) -> list[dict]:
    errors = []
    for e in exc.errors():
        loc = [part for part in e["loc"] if isinstance(part, str) and part != "body"]
        errors.append({"field": ".".join(loc) or "body", "message": e["msg"]})
    return errors
