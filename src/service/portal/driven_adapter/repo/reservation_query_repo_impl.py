from typing import List

import asyncpg

from src.platform.database.asyncpg_setting import get_asyncpg_pool
from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger
from src.service.portal.app.interface.i_reservation_query_repo import IReservationQueryRepo
from src.service.portal.domain.entity.reservation_entity import Reservation
from src.service.portal.domain.value_object.time_range import TimeRange


class ReservationQueryRepoImpl(IReservationQueryRepo):
    @Logger.io
    async def list_by_user_id(self, *, user_id: int) -> List[Reservation]:
        op = 'storage.reservation.list_by_user_id'
        try:
            async with (await get_asyncpg_pool()).acquire() as conn:
                rows = await conn.fetch(
                    """
                    SELECT reservation_id, place_id, start, finish, user_id
                    FROM reservation
                    WHERE user_id = $1
                    ORDER BY start DESC
                    """,
                    user_id,
                )
        except (asyncpg.PostgresError, OSError) as e:
            raise StorageError(op, e) from e

        return [
            Reservation(
                reservation_id=row['reservation_id'],
                place_id=row['place_id'],
                start=row['start'],
                finish=row['finish'],
                user_id=row['user_id'],
            )
            for row in rows
        ]

    @Logger.io
    async def has_user_reservation_in_range(self, *, user_id: int, time_range: TimeRange) -> bool:
        op = 'storage.reservation.has_user_reservation_in_range'
        try:
            async with (await get_asyncpg_pool()).acquire() as conn:
                found = await conn.fetchval(
                    """
                    SELECT reservation_id FROM reservation
                    WHERE user_id = $1 AND (start, finish) OVERLAPS ($2::timestamp, $3::timestamp)
                    LIMIT 1
                    """,
                    user_id,
                    time_range.start,
                    time_range.finish,
                )
        except (asyncpg.PostgresError, OSError) as e:
            raise StorageError(op, e) from e

        return found is not None
