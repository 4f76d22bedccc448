"""
Reservation Command Repository Implementation

Insert runs an overlap check followed by the insert. By default the two
statements are not isolated from concurrent inserts; with ``serializable=True``
they share one SERIALIZABLE transaction and a conflicting concurrent insert is
reported as the place being taken.
"""

import asyncpg

from src.platform.database.asyncpg_setting import get_asyncpg_pool
from src.platform.exception.exceptions import PlaceTakenError, StorageError
from src.platform.logging.loguru_io import Logger
from src.service.portal.app.interface.i_reservation_command_repo import IReservationCommandRepo
from src.service.portal.domain.entity.reservation_entity import Reservation
from src.service.portal.domain.value_object.time_range import TimeRange


_IS_PLACE_TAKEN_SQL = """
    SELECT reservation_id FROM reservation
    WHERE place_id = $1 AND (start, finish) OVERLAPS ($2::timestamp, $3::timestamp)
    LIMIT 1
"""

_INSERT_SQL = """
    INSERT INTO reservation (place_id, start, finish, user_id)
    VALUES ($1, $2, $3, $4)
    RETURNING reservation_id
"""


class ReservationCommandRepoImpl(IReservationCommandRepo):
    @staticmethod
    async def _check_and_insert(
        conn: asyncpg.Connection, *, place_id: int, user_id: int, time_range: TimeRange
    ) -> int:
        taken = await conn.fetchval(
            _IS_PLACE_TAKEN_SQL, place_id, time_range.start, time_range.finish
        )
        if taken is not None:
            raise PlaceTakenError()

        return await conn.fetchval(
            _INSERT_SQL, place_id, time_range.start, time_range.finish, user_id
        )

    @Logger.io
    async def insert(
        self, *, place_id: int, user_id: int, time_range: TimeRange, serializable: bool = False
    ) -> Reservation:
        op = 'storage.reservation.insert'
        try:
            async with (await get_asyncpg_pool()).acquire() as conn:
                if serializable:
                    async with conn.transaction(isolation='serializable'):
                        reservation_id = await self._check_and_insert(
                            conn, place_id=place_id, user_id=user_id, time_range=time_range
                        )
                else:
                    reservation_id = await self._check_and_insert(
                        conn, place_id=place_id, user_id=user_id, time_range=time_range
                    )
        except asyncpg.SerializationError as e:
            raise PlaceTakenError() from e
        except (asyncpg.PostgresError, OSError) as e:
            raise StorageError(op, e) from e

        return Reservation(
            reservation_id=reservation_id,
            place_id=place_id,
            user_id=user_id,
            start=time_range.start,
            finish=time_range.finish,
        )

    @Logger.io
    async def update(self, *, reservation_id: int, place_id: int, time_range: TimeRange) -> None:
        op = 'storage.reservation.update'
        try:
            async with (await get_asyncpg_pool()).acquire() as conn:
                await conn.execute(
                    'UPDATE reservation SET place_id = $2, start = $3, finish = $4 '
                    'WHERE reservation_id = $1',
                    reservation_id,
                    place_id,
                    time_range.start,
                    time_range.finish,
                )
        except (asyncpg.PostgresError, OSError) as e:
            raise StorageError(op, e) from e

    @Logger.io
    async def delete(self, *, reservation_id: int) -> None:
        op = 'storage.reservation.delete'
        try:
            async with (await get_asyncpg_pool()).acquire() as conn:
                await conn.execute(
                    'DELETE FROM reservation WHERE reservation_id = $1', reservation_id
                )
        except (asyncpg.PostgresError, OSError) as e:
            raise StorageError(op, e) from e
