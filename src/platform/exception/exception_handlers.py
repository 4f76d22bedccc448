from typing import Any, Callable, Coroutine, Sequence

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from src.platform.exception.exceptions import (
    ERROR_KIND_STATUS,
    CustomBaseError,
    ErrorKind,
)
from src.platform.logging.loguru_io import Logger

# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]

# Body-level error types meaning the payload is not a JSON object at all
_UNDECODABLE_BODY_TYPES = {'json_invalid', 'model_type', 'model_attributes_type', 'dict_type'}


def error_envelope(message: str) -> dict[str, str]:
    return {'status': 'Error', 'error': message}


def _op(request: Request) -> str:
    return f'{request.method} {request.url.path}'


def classify_validation_errors(errors: Sequence[Any]) -> tuple[ErrorKind, str]:
    """Map pydantic/FastAPI validation errors to an error kind and a caller-safe message."""
    for error in errors:
        loc = tuple(error.get('loc', ()))
        if error.get('type') in _UNDECODABLE_BODY_TYPES and loc[:1] == ('body',):
            return ErrorKind.DECODE_FAILURE, 'failed to decode request'
        if error.get('type') == 'missing' and loc == ('body',):
            return ErrorKind.EMPTY_BODY, 'empty request'

    messages = []
    for error in errors:
        fields = [str(part) for part in error.get('loc', ()) if isinstance(part, str)]
        field = fields[-1] if fields else 'request'
        if error.get('type') == 'missing':
            messages.append(f'field {field} is a required field')
        else:
            messages.append(f'field {field} is not valid')
    return ErrorKind.VALIDATION_FAILURE, ', '.join(messages)


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else CustomBaseError(str(exc))
    if not getattr(error, '_has_logged', False):
        Logger.base.error(f'[{_op(request)}] {type(error).__name__}: {error.message}')
    return JSONResponse(status_code=error.status_code, content=error_envelope(error.message))


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    kind, message = classify_validation_errors(errors)
    Logger.base.error(f'[{_op(request)}] {kind}: {errors}')
    return JSONResponse(status_code=ERROR_KIND_STATUS[kind], content=error_envelope(message))


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    status_code = exc.status_code if isinstance(exc, StarletteHTTPException) else 500
    detail = exc.detail if isinstance(exc, StarletteHTTPException) else 'internal error'
    return JSONResponse(status_code=status_code, content=error_envelope(str(detail)))


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.opt(exception=exc).error(f'[{_op(request)}] unhandled {type(exc).__name__}')
    return JSONResponse(
        status_code=ERROR_KIND_STATUS[ErrorKind.UNEXPECTED],
        content=error_envelope('internal error'),
    )


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    StarletteHTTPException: http_exception_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
