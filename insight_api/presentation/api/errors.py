"""Exception handlers mapping domain exceptions to the ``{"error": ...}`` envelope."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from insight_api.domain.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    RepositoryError,
)

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _invalid_argument(request: Request, exc: InvalidArgumentError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, str(exc))


async def _not_found(request: Request, exc: EntityNotFoundError) -> JSONResponse:
    return _error(status.HTTP_404_NOT_FOUND, str(exc))


async def _repository_failure(request: Request, exc: RepositoryError) -> JSONResponse:
    logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc, exc.cause)
    return _error(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An error occurred while accessing the article store",
    )


async def _request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', 'invalid')}"
        for err in exc.errors()
    )
    return _error(status.HTTP_400_BAD_REQUEST, f"Invalid request: {details}")


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error-envelope handlers on the application."""
    app.add_exception_handler(InvalidArgumentError, _invalid_argument)
    app.add_exception_handler(EntityNotFoundError, _not_found)
    app.add_exception_handler(RepositoryError, _repository_failure)
    app.add_exception_handler(RequestValidationError, _request_validation)
