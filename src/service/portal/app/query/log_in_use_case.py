"""
Login (UserAuth)

Unknown login and wrong password fail with the same LoginError so callers
cannot tell which one was wrong.
"""

from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.exception.exceptions import DomainError, StorageError
from src.platform.logging.loguru_io import Logger
from src.service.portal.app.interface.i_user_query_repo import IUserQueryRepo
from src.service.portal.domain.entity.user_entity import UserEntity


class LogInUseCase:
    def __init__(self, *, user_query_repo: IUserQueryRepo) -> None:
        self.user_query_repo = user_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_query_repo: IUserQueryRepo = Depends(Provide['user_query_repo']),
    ) -> Self:
        return cls(user_query_repo=user_query_repo)

    @Logger.io
    async def authenticate(self, *, login: str, password: str) -> UserEntity:
        try:
            user = await self.user_query_repo.verify_password(login=login, plain_password=password)
        except StorageError as e:
            raise DomainError('failed to log in') from e

        return UserEntity.validate_user_exists(user)
