"""
API errors and their JSON rendering.

Every error response body has the shape {"error": "<message>"}.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "corpo da requisição inválido"
INTERNAL_ERROR_MESSAGE = "erro interno"


class ApiError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def bad_request(message: str) -> ApiError:
    return ApiError(status.HTTP_400_BAD_REQUEST, message)


def not_found(message: str) -> ApiError:
    return ApiError(status.HTTP_404_NOT_FOUND, message)


@contextmanager
def storage_failure(message: str, event: str, *args: Any) -> Iterator[None]:
    """
    Turn any unexpected failure inside the block into a 500 with `message`.

    The original exception is logged as `event` (a printf-style template
    filled with `args`) and chained, but never sent to the client.
    """
    try:
        yield
    except ApiError:
        raise
    except Exception as exc:
        logger.exception(event, *args)
        raise ApiError(status.HTTP_500_INTERNAL_SERVER_ERROR, message) from exc


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("invalid_body path=%s errors=%s", request.url.path, exc.errors())
        return _error_response(status.HTTP_400_BAD_REQUEST, INVALID_BODY_MESSAGE)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled_error path=%s", request.url.path, exc_info=exc)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
