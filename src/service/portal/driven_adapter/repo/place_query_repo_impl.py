"""
Place Query Repository Implementation

Availability is computed in one statement: every place marked available, minus
the places with a reservation overlapping the period, plus those places marked
unavailable with the reservation's user and period.
"""

from typing import List, Optional

import asyncpg

from src.platform.database.asyncpg_setting import get_asyncpg_pool
from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger
from src.service.portal.app.interface.i_place_query_repo import IPlaceQueryRepo
from src.service.portal.domain.entity.place_entity import ActualPlace, to_epoch_millis
from src.service.portal.domain.value_object.time_range import TimeRange


_ACTUAL_PLACES_SQL = """
    (
        SELECT place_id, name, COALESCE(phone, '') AS phone,
               COALESCE(internet, '') AS internet, COALESCE(second_screen, '') AS second_screen,
               true AS is_available, 0 AS user_id,
               NULL::timestamp AS start, NULL::timestamp AS finish
        FROM place
        EXCEPT
        SELECT DISTINCT place_id, name, COALESCE(phone, ''),
               COALESCE(internet, ''), COALESCE(second_screen, ''),
               true, 0, NULL::timestamp, NULL::timestamp
        FROM place_and_reservation
        WHERE ($1::timestamp, $2::timestamp) OVERLAPS (start, finish)
    )
    UNION
    (
        SELECT DISTINCT place_id, name, COALESCE(phone, ''),
               COALESCE(internet, ''), COALESCE(second_screen, ''),
               false, user_id, start, finish
        FROM place_and_reservation
        WHERE ($1::timestamp, $2::timestamp) OVERLAPS (start, finish)
    )
    ORDER BY place_id
"""


class PlaceQueryRepoImpl(IPlaceQueryRepo):
    @staticmethod
    def _row_to_actual_place(row: asyncpg.Record) -> ActualPlace:
        return ActualPlace(
            place_id=row['place_id'],
            name=row['name'],
            phone=row['phone'],
            internet=row['internet'],
            second_screen=row['second_screen'],
            is_available=row['is_available'],
            user_id=row['user_id'],
            start=to_epoch_millis(row['start']),
            finish=to_epoch_millis(row['finish']),
        )

    @Logger.io
    async def get_actual_places(self, *, time_range: TimeRange) -> List[ActualPlace]:
        op = 'storage.place.get_actual_places'
        try:
            async with (await get_asyncpg_pool()).acquire() as conn:
                rows = await conn.fetch(_ACTUAL_PLACES_SQL, time_range.start, time_range.finish)
        except (asyncpg.PostgresError, OSError) as e:
            raise StorageError(op, e) from e

        return [self._row_to_actual_place(row) for row in rows]

    @Logger.io
    async def get_place_name(self, *, place_id: int) -> Optional[str]:
        op = 'storage.place.get_place_name'
        try:
            async with (await get_asyncpg_pool()).acquire() as conn:
                return await conn.fetchval('SELECT name FROM place WHERE place_id = $1', place_id)
        except (asyncpg.PostgresError, OSError) as e:
            raise StorageError(op, e) from e
