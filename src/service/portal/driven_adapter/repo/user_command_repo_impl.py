import asyncpg

from src.platform.database.asyncpg_setting import get_asyncpg_pool
from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger
from src.service.portal.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.portal.domain.entity.user_entity import UserEntity


class UserCommandRepoImpl(IUserCommandRepo):
    @Logger.io
    async def create(self, *, user: UserEntity) -> UserEntity:
        op = 'storage.user.create'
        try:
            async with (await get_asyncpg_pool()).acquire() as conn:
                user.user_id = await conn.fetchval(
                    """
                    INSERT INTO "user" (login, username, hashed_password, role)
                    VALUES ($1, $2, $3, $4)
                    RETURNING user_id
                    """,
                    user.login,
                    user.username,
                    user.hashed_password,
                    int(user.role),
                )
        except (asyncpg.PostgresError, OSError) as e:
            raise StorageError(op, e) from e

        return user
