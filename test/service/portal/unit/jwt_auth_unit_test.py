from datetime import datetime, timedelta, timezone

import jwt
import pytest

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError, MissingClaimError
from src.service.portal.domain.entity.user_entity import UserEntity, UserRole
from src.service.portal.domain.value_object.principal import Principal
from src.service.portal.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


def _encode(payload: dict) -> str:
    return jwt.encode(
        payload, settings.SECRET_KEY.get_secret_value(), algorithm=settings.ALGORITHM
    )


class TestJwtAuth:
    @pytest.fixture
    def jwt_auth(self) -> JwtAuth:
        return JwtAuth()

    def test_round_trip_to_principal(self, jwt_auth: JwtAuth):
        token = jwt_auth.create_jwt_token(
            UserEntity(login='admin', username='Admin', user_id=1, role=UserRole.SUPER_ADMIN)
        )

        assert jwt_auth.get_principal_from_jwt(token) == Principal(
            user_id=1, username='Admin', role=UserRole.SUPER_ADMIN
        )

    def test_expired_token(self, jwt_auth: JwtAuth):
        past = datetime.now(timezone.utc) - timedelta(hours=1)
        token = _encode({'user_id': 1, 'username': 'A', 'role': 1, 'exp': past})

        with pytest.raises(AuthenticationError):
            jwt_auth.get_principal_from_jwt(token)

    def test_wrong_signature(self, jwt_auth: JwtAuth):
        token = jwt.encode({'user_id': 1, 'username': 'A', 'role': 1}, 'other', algorithm='HS256')

        with pytest.raises(AuthenticationError, match='invalid token'):
            jwt_auth.get_principal_from_jwt(token)

    @pytest.mark.parametrize(
        'payload, message',
        [
            ({'username': 'A', 'role': 1}, 'no user id in token claims'),
            ({'user_id': 'one', 'username': 'A', 'role': 1}, 'no user id in token claims'),
            ({'user_id': 1, 'role': 1}, 'no username in token'),
            ({'user_id': 1, 'username': 'A'}, 'no user role in token'),
            ({'user_id': 1, 'username': 'A', 'role': 0}, 'no user role in token'),
        ],
    )
    def test_missing_claims(self, jwt_auth: JwtAuth, payload: dict, message: str):
        with pytest.raises(MissingClaimError, match=message) as exc_info:
            jwt_auth.get_principal_from_jwt(_encode(payload))

        assert exc_info.value.status_code == 500
