from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.portal.domain.entity.place_entity import ActualPlace
from src.service.portal.domain.value_object.time_range import TimeRange


class IPlaceQueryRepo(ABC):
    @abstractmethod
    async def get_actual_places(self, *, time_range: TimeRange) -> List[ActualPlace]:
        """
        Availability of every place for the period, ordered by place_id.

        Places without an overlapping reservation appear once as available.
        Places with overlapping reservations appear once per reservation as
        unavailable, carrying that reservation's user and period.
        """
        pass

    @abstractmethod
    async def get_place_name(self, *, place_id: int) -> Optional[str]:
        pass
