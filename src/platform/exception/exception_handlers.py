"""
HTTP mapping for booking errors

- DomainError             -> 400 (bad customer input)
- NotFoundError           -> 404 (unknown booking or service)
- ConflictError           -> 409 (slot taken, booking already cancelled)
- ServiceUnavailableError -> 503 with Retry-After (store down or too slow)
- RequestValidationError  -> 400 with one "field: message" line per problem
- anything else           -> 500, logged with traceback

Every body is {"detail": ...}.
"""

from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.responses import Response

from src.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    ServiceUnavailableError,
)
from src.platform.logging.loguru_io import Logger


ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]

RETRY_AFTER_SECONDS = 1


def _route(request: Request) -> str:
    return f'{request.method} {request.url.path}'


async def bad_request_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, DomainError)
    Logger.base.info(f'🚫 [HTTP] {_route(request)} rejected: {exc.message}')
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'detail': exc.message})


async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, NotFoundError)
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={'detail': exc.message})


async def conflict_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, ConflictError)
    Logger.base.info(f'⚔️  [HTTP] {_route(request)} conflict: {exc.message}')
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={'detail': exc.message})


async def unavailable_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, ServiceUnavailableError)
    Logger.base.warning(f'⏳ [HTTP] {_route(request)} unavailable: {exc.message}')
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={'detail': exc.message},
        headers={'Retry-After': str(RETRY_AFTER_SECONDS)},
    )


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, RequestValidationError)
    problems = [
        f"{'.'.join(str(part) for part in error['loc'] if part != 'body')}: {error['msg']}"
        for error in exc.errors()
    ]
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'detail': problems})


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.opt(exception=exc).error(
        f'💥 [HTTP] {_route(request)} unhandled {type(exc).__name__}'
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={'detail': 'Internal server error'},
    )


EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    DomainError: bad_request_handler,
    NotFoundError: not_found_handler,
    ConflictError: conflict_handler,
    ServiceUnavailableError: unavailable_handler,
    RequestValidationError: validation_error_handler,
    Exception: general_500_exception_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
