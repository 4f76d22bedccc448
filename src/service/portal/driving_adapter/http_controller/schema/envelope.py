from typing import Literal

from pydantic import BaseModel


class OkResponse(BaseModel):
    """Success envelope; endpoint payloads extend it."""

    status: Literal['OK'] = 'OK'
