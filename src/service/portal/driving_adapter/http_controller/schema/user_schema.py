"""
User API Schemas - Pydantic models for request/response
"""

from pydantic import BaseModel, Field, SecretStr

from src.service.portal.driving_adapter.http_controller.schema.envelope import OkResponse


class LoginRequest(BaseModel):
    login: str = Field(..., min_length=1)
    password: SecretStr = Field(..., min_length=1, max_length=72)

    model_config = {'json_schema_extra': {'example': {'login': 'editor', 'password': 'P@ssw0rd'}}}


class LoginResponse(OkResponse):
    token: str


class UserInfo(BaseModel):
    user_id: int
    username: str
    role: int


class MeResponse(OkResponse):
    user: UserInfo
