from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.exception.exceptions import DomainError, StorageError
from src.platform.logging.loguru_io import Logger
from src.service.portal.app.interface.i_reservation_command_repo import IReservationCommandRepo
from src.service.portal.domain.value_object.time_range import TimeRange


class UpdateReservationUseCase:
    """Replaces place and period of a reservation; no existence or overlap check."""

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
    async def execute(self, *, reservation_id: int, place_id: int, time_range: TimeRange) -> None:
        try:
            await self.reservation_command_repo.update(
                reservation_id=reservation_id, place_id=place_id, time_range=time_range
            )
        except StorageError as e:
            raise DomainError('failed to update reservation') from e
