from typing import Optional

import asyncpg
from pydantic import SecretStr

from src.platform.database.asyncpg_setting import get_asyncpg_pool
from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger
from src.service.portal.app.interface.i_password_hasher import IPasswordHasher
from src.service.portal.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.portal.domain.entity.user_entity import UserEntity
from src.service.portal.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)


class UserQueryRepoImpl(IUserQueryRepo):
    def __init__(self, password_hasher: IPasswordHasher | None = None) -> None:
        self.password_hasher = password_hasher or BcryptPasswordHasher()

    @staticmethod
    def _row_to_entity(row: asyncpg.Record) -> UserEntity:
        return UserEntity(
            user_id=row['user_id'],
            login=row['login'],
            username=row['username'],
            hashed_password=row['hashed_password'],
            role=row['role'],
        )

    @Logger.io
    async def get_by_login(self, *, login: str) -> Optional[UserEntity]:
        op = 'storage.user.get_by_login'
        try:
            async with (await get_asyncpg_pool()).acquire() as conn:
                row = await conn.fetchrow(
                    'SELECT user_id, login, username, hashed_password, role '
                    'FROM "user" WHERE login = $1',
                    login,
                )
        except (asyncpg.PostgresError, OSError) as e:
            raise StorageError(op, e) from e

        if not row:
            return None

        return self._row_to_entity(row)

    @Logger.io
    async def verify_password(self, *, login: str, plain_password: str) -> Optional[UserEntity]:
        user = await self.get_by_login(login=login)
        if not user:
            return None

        if not self.password_hasher.verify_password(
            plain_password=SecretStr(plain_password), hashed_password=user.hashed_password
        ):
            return None

        return user
