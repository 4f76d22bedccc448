from enum import IntEnum
from typing import Optional

import attrs
from pydantic import SecretStr

from src.platform.exception.exceptions import LoginError
from src.service.portal.app.interface.i_password_hasher import IPasswordHasher


class UserRole(IntEnum):
    """Role codes as stored in the user table and carried in the token."""

    USER = 1
    SHOP_EDITOR = 2
    SUPER_ADMIN = 3


SHOP_EDITOR_ROLES = frozenset({UserRole.SHOP_EDITOR, UserRole.SUPER_ADMIN})


@attrs.define
class UserEntity:
    login: str = ''
    username: str = ''
    hashed_password: str = attrs.field(default='', repr=False)  # Hide from repr for security
    user_id: Optional[int] = None
    role: int = UserRole.USER

    @staticmethod
    def validate_user_exists(user_entity: Optional['UserEntity']) -> 'UserEntity':
        # Same error for unknown login and wrong password
        if not user_entity:
            raise LoginError()

        return user_entity

    def set_password(self, plain_password: str, password_hasher: IPasswordHasher) -> None:
        self.hashed_password = password_hasher.hash_password(
            plain_password=SecretStr(plain_password)
        )
