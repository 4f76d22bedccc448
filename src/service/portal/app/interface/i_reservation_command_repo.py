from abc import ABC, abstractmethod

from src.service.portal.domain.entity.reservation_entity import Reservation
from src.service.portal.domain.value_object.time_range import TimeRange


class IReservationCommandRepo(ABC):
    @abstractmethod
    async def insert(
        self, *, place_id: int, user_id: int, time_range: TimeRange, serializable: bool = False
    ) -> Reservation:
        """
        Insert a reservation unless the place already has one overlapping the period.

        Raises:
            PlaceTakenError: an overlapping reservation exists for the place
        """
        pass

    @abstractmethod
    async def update(self, *, reservation_id: int, place_id: int, time_range: TimeRange) -> None:
        pass

    @abstractmethod
    async def delete(self, *, reservation_id: int) -> None:
        pass
