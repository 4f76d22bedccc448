from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.portal.app.query.log_in_use_case import LogInUseCase
from src.service.portal.domain.value_object.principal import Principal
from src.service.portal.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.portal.driving_adapter.http_controller.schema.user_schema import (
    LoginRequest,
    LoginResponse,
    MeResponse,
    UserInfo,
)


# === API Router ===

router = APIRouter()
bearer_scheme = HTTPBearer(auto_error=False)


@inject
async def get_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> Principal:
    """Decode the bearer token into the caller's principal (stateless, no DB query)."""
    return jwt_auth.get_principal_from_jwt(credentials.credentials if credentials else None)


@router.post('/login')
@Logger.io
@inject
async def log_in(
    request: LoginRequest,
    use_case: LogInUseCase = Depends(LogInUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> LoginResponse:
    user_entity = await use_case.authenticate(
        login=request.login, password=request.password.get_secret_value()
    )

    return LoginResponse(token=jwt_auth.create_jwt_token(user_entity))


@router.get('/me')
@Logger.io
async def get_me(principal: Principal = Depends(get_principal)) -> MeResponse:
    return MeResponse(
        user=UserInfo(
            user_id=principal.user_id,
            username=principal.username,
            role=principal.role,
        )
    )
