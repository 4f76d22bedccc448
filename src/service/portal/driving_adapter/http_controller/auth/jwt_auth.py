"""
Bearer token issuing and decoding.

Claims are decoded once into a typed Principal; a token without a usable
user id, username or role is rejected with a missing-claim error.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from src.platform.config.core_setting import Settings, settings as default_settings
from src.platform.exception.exceptions import AuthenticationError, MissingClaimError
from src.service.portal.domain.entity.user_entity import UserEntity
from src.service.portal.domain.value_object.principal import Principal


class JwtAuth:
    def __init__(self, config: Settings | None = None) -> None:
        config = config or default_settings
        self.secret = config.SECRET_KEY.get_secret_value()
        self.algorithm = config.ALGORITHM
        self.token_expire = timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES)

    def create_jwt_token(self, user_entity: UserEntity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'sub': str(user_entity.user_id),
            'exp': now + self.token_expire,
            'iat': now,
            'user_id': user_entity.user_id,
            'username': user_entity.username,
            'role': int(user_entity.role),
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict[str, Any]:
        try:
            return jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.PyJWTError as e:
            raise AuthenticationError('invalid token') from e

    def get_principal_from_jwt(self, token: Optional[str]) -> Principal:
        if not token:
            raise AuthenticationError('not authenticated')

        payload = self.decode_jwt_token(token)

        user_id = payload.get('user_id')
        if not isinstance(user_id, int) or isinstance(user_id, bool) or user_id <= 0:
            raise MissingClaimError('no user id in token claims')

        username = payload.get('username')
        if not isinstance(username, str) or not username:
            raise MissingClaimError('no username in token')

        role = payload.get('role')
        if not isinstance(role, int) or isinstance(role, bool) or role == 0:
            raise MissingClaimError('no user role in token')

        return Principal(user_id=user_id, username=username, role=role)
