from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.exception.exceptions import DomainError, StorageError
from src.platform.logging.loguru_io import Logger
from src.service.portal.app.interface.i_reservation_command_repo import IReservationCommandRepo


class DeleteReservationUseCase:
    def __init__(self, *, reservation_command_repo: IReservationCommandRepo) -> None:
        self.reservation_command_repo = reservation_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        reservation_command_repo: IReservationCommandRepo = Depends(
            Provide['reservation_command_repo']
        ),
    ) -> Self:
        return cls(reservation_command_repo=reservation_command_repo)

    @Logger.io
    async def execute(self, *, reservation_id: int) -> None:
        try:
            await self.reservation_command_repo.delete(reservation_id=reservation_id)
        except StorageError as e:
            raise DomainError('failed to delete reservation') from e
