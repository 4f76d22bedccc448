from abc import ABC, abstractmethod
from typing import List

from src.service.portal.domain.entity.reservation_entity import Reservation
from src.service.portal.domain.value_object.time_range import TimeRange


class IReservationQueryRepo(ABC):
    @abstractmethod
    async def list_by_user_id(self, *, user_id: int) -> List[Reservation]:
        """Reservations of the user, latest start first."""
        pass

    @abstractmethod
    async def has_user_reservation_in_range(self, *, user_id: int, time_range: TimeRange) -> bool:
        pass
