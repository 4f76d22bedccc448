from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import DomainError, StorageError
from src.platform.logging.loguru_io import Logger
from src.service.portal.app.interface.i_place_query_repo import IPlaceQueryRepo
from src.service.portal.app.interface.i_reservation_command_repo import IReservationCommandRepo
from src.service.portal.domain.entity.reservation_entity import Reservation
from src.service.portal.domain.value_object.time_range import TimeRange


class CreateReservationUseCase:
    def __init__(
        self,
        *,
        place_query_repo: IPlaceQueryRepo,
        reservation_command_repo: IReservationCommandRepo,
        serializable_insert: bool = False,
    ) -> None:
        self.place_query_repo = place_query_repo
        self.reservation_command_repo = reservation_command_repo
        self.serializable_insert = serializable_insert

    @classmethod
    @inject
    def depends(
        cls,
        place_query_repo: IPlaceQueryRepo = Depends(Provide['place_query_repo']),
        reservation_command_repo: IReservationCommandRepo = Depends(
            Provide['reservation_command_repo']
        ),
        config: Settings = Depends(Provide['config_service']),
    ) -> Self:
        return cls(
            place_query_repo=place_query_repo,
            reservation_command_repo=reservation_command_repo,
            serializable_insert=config.RESERVATION_SERIALIZABLE_INSERT,
        )

    @Logger.io
    async def execute(self, *, user_id: int, place_id: int, time_range: TimeRange) -> Reservation:
        try:
            if await self.place_query_repo.get_place_name(place_id=place_id) is None:
                raise DomainError('place not found')

            # PlaceTakenError from the repo reaches the caller as is
            return await self.reservation_command_repo.insert(
                place_id=place_id,
                user_id=user_id,
                time_range=time_range,
                serializable=self.serializable_insert,
            )
        except StorageError as e:
            raise DomainError('failed to create reservation') from e
