from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.exception.exceptions import DomainError, StorageError
from src.platform.logging.loguru_io import Logger
from src.service.portal.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.portal.domain.entity.reservation_entity import Reservation
from src.service.portal.domain.value_object.time_range import TimeRange


class UserReservationQueryUseCase:
    def __init__(self, *, reservation_query_repo: IReservationQueryRepo) -> None:
        self.reservation_query_repo = reservation_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        reservation_query_repo: IReservationQueryRepo = Depends(Provide['reservation_query_repo']),
    ) -> Self:
        return cls(reservation_query_repo=reservation_query_repo)

    @Logger.io
    async def list_reservations(self, *, user_id: int) -> List[Reservation]:
        try:
            return await self.reservation_query_repo.list_by_user_id(user_id=user_id)
        except StorageError as e:
            raise DomainError('failed to get reservation list') from e

    @Logger.io
    async def has_reservation_in_range(self, *, user_id: int, time_range: TimeRange) -> bool:
        try:
            return await self.reservation_query_repo.has_user_reservation_in_range(
                user_id=user_id, time_range=time_range
            )
        except StorageError as e:
            raise DomainError('failed to check reservations') from e
