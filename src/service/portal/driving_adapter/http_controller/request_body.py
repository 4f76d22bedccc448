"""
Manual JSON body decoding for role-gated routes.

FastAPI decodes a declared body model before solving dependencies. Routes that
must answer 403 before looking at the payload declare the body through
``body_after``, which runs the role dependency before reading the request.
Errors are raised as ``RequestValidationError`` so the regular validation
handler classifies them.
"""

from collections.abc import Awaitable
from typing import Any, Callable, TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError


_M = TypeVar('_M', bound=BaseModel)


async def decode_body(request: Request, model: type[_M]) -> _M:
    body = await request.body()
    if not body.strip():
        raise RequestValidationError(
            [{'type': 'missing', 'loc': ('body',), 'msg': 'Field required', 'input': None}]
        )

    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        raise RequestValidationError(
            [{**error, 'loc': ('body', *error['loc'])} for error in e.errors()]
        ) from e


def body_after(gate: Callable[..., Any], model: type[_M]) -> Callable[..., Awaitable[_M]]:
    """Dependency decoding ``model`` only once ``gate`` has passed."""

    async def _decode(request: Request, _: Any = Depends(gate)) -> _M:
        return await decode_body(request, model)

    return _decode
