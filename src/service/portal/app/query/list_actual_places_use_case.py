from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.exception.exceptions import DomainError, NotFoundError, StorageError
from src.platform.logging.loguru_io import Logger
from src.service.portal.app.interface.i_place_query_repo import IPlaceQueryRepo
from src.service.portal.domain.entity.place_entity import ActualPlace, Place
from src.service.portal.domain.value_object.time_range import TimeRange


class ListActualPlacesUseCase:
    def __init__(self, *, place_query_repo: IPlaceQueryRepo) -> None:
        self.place_query_repo = place_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        place_query_repo: IPlaceQueryRepo = Depends(Provide['place_query_repo']),
    ) -> Self:
        return cls(place_query_repo=place_query_repo)

    @Logger.io
    async def list_actual_places(self, *, time_range: TimeRange) -> List[ActualPlace]:
        try:
            return await self.place_query_repo.get_actual_places(time_range=time_range)
        except StorageError as e:
            raise DomainError('failed to get place list') from e

    @Logger.io
    async def get_place(self, *, place_id: int) -> Place:
        try:
            name = await self.place_query_repo.get_place_name(place_id=place_id)
        except StorageError as e:
            raise DomainError('failed to get place') from e

        if name is None:
            raise NotFoundError('place not found')

        return Place(place_id=place_id, name=name)
