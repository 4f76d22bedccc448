"""
Repository tests against PostgreSQL.

Periods follow OVERLAPS semantics: [start, finish) half-open, so a booking that
ends exactly when another starts does not collide with it.
"""

from datetime import datetime

import pytest

from src.platform.exception.exceptions import PlaceTakenError
from src.service.portal.driven_adapter.repo.place_query_repo_impl import PlaceQueryRepoImpl
from src.service.portal.driven_adapter.repo.reservation_command_repo_impl import (
    ReservationCommandRepoImpl,
)
from src.service.portal.driven_adapter.repo.reservation_query_repo_impl import (
    ReservationQueryRepoImpl,
)
from src.service.portal.domain.entity.place_entity import to_epoch_millis
from src.service.portal.domain.value_object.time_range import TimeRange


def _period(day: int, start_hour: int, finish_hour: int) -> TimeRange:
    return TimeRange(
        start=datetime(2025, 3, day, start_hour), finish=datetime(2025, 3, day, finish_hour)
    )


@pytest.fixture
async def user_id(insert_user) -> int:
    return await insert_user('user', 'P@ssw0rd')


@pytest.fixture
async def place_ids(insert_place) -> list[int]:
    return [await insert_place('Desk 1', '101'), await insert_place('Desk 2')]


class TestActualPlaces:
    @pytest.mark.asyncio
    async def test_disjoint_period_leaves_every_place_available(self, user_id, place_ids):
        await ReservationCommandRepoImpl().insert(
            place_id=place_ids[0], user_id=user_id, time_range=_period(1, 10, 12)
        )

        places = await PlaceQueryRepoImpl().get_actual_places(time_range=_period(1, 13, 14))

        assert [(p.place_id, p.is_available) for p in places] == [
            (place_ids[0], True),
            (place_ids[1], True),
        ]
        assert places[0].phone == '101'
        assert places[0].user_id == 0
        assert places[0].start == 0

    @pytest.mark.asyncio
    async def test_overlapping_period_marks_place_taken_once(self, user_id, place_ids):
        booked = _period(1, 10, 12)
        await ReservationCommandRepoImpl().insert(
            place_id=place_ids[0], user_id=user_id, time_range=booked
        )

        places = await PlaceQueryRepoImpl().get_actual_places(time_range=_period(1, 11, 13))

        taken = [p for p in places if p.place_id == place_ids[0]]
        assert len(taken) == 1
        assert taken[0].is_available is False
        assert taken[0].user_id == user_id
        assert taken[0].start == to_epoch_millis(booked.start)
        assert taken[0].finish == to_epoch_millis(booked.finish)
        assert [p.is_available for p in places if p.place_id == place_ids[1]] == [True]

    @pytest.mark.asyncio
    async def test_touching_period_is_available(self, user_id, place_ids):
        await ReservationCommandRepoImpl().insert(
            place_id=place_ids[0], user_id=user_id, time_range=_period(1, 10, 12)
        )

        places = await PlaceQueryRepoImpl().get_actual_places(time_range=_period(1, 12, 14))

        assert all(p.is_available for p in places)

    @pytest.mark.asyncio
    async def test_reversed_period_matches_like_the_ordered_one(self, user_id, place_ids):
        await ReservationCommandRepoImpl().insert(
            place_id=place_ids[0], user_id=user_id, time_range=_period(1, 10, 12)
        )
        reversed_period = TimeRange(
            start=datetime(2025, 3, 1, 13), finish=datetime(2025, 3, 1, 11)
        )

        places = await PlaceQueryRepoImpl().get_actual_places(time_range=reversed_period)

        assert [(p.place_id, p.is_available) for p in places] == [
            (place_ids[0], False),
            (place_ids[1], True),
        ]

    @pytest.mark.asyncio
    async def test_place_name(self, place_ids):
        repo = PlaceQueryRepoImpl()

        assert await repo.get_place_name(place_id=place_ids[1]) == 'Desk 2'
        assert await repo.get_place_name(place_id=9999) is None


class TestInsertReservation:
    @pytest.mark.asyncio
    @pytest.mark.parametrize('serializable', [False, True])
    async def test_overlap_is_rejected(self, user_id, place_ids, serializable):
        repo = ReservationCommandRepoImpl()
        await repo.insert(place_id=place_ids[0], user_id=user_id, time_range=_period(1, 10, 12))

        with pytest.raises(PlaceTakenError):
            await repo.insert(
                place_id=place_ids[0],
                user_id=user_id,
                time_range=_period(1, 11, 13),
                serializable=serializable,
            )

    @pytest.mark.asyncio
    async def test_disjoint_insert_is_listed(self, user_id, place_ids):
        repo = ReservationCommandRepoImpl()
        first = await repo.insert(
            place_id=place_ids[0], user_id=user_id, time_range=_period(1, 10, 12)
        )
        second = await repo.insert(
            place_id=place_ids[0], user_id=user_id, time_range=_period(1, 12, 14)
        )

        reservations = await ReservationQueryRepoImpl().list_by_user_id(user_id=user_id)

        assert {r.reservation_id for r in reservations} == {
            first.reservation_id,
            second.reservation_id,
        }

    @pytest.mark.asyncio
    async def test_same_period_on_another_place_is_fine(self, user_id, place_ids):
        repo = ReservationCommandRepoImpl()
        await repo.insert(place_id=place_ids[0], user_id=user_id, time_range=_period(1, 10, 12))

        created = await repo.insert(
            place_id=place_ids[1], user_id=user_id, time_range=_period(1, 10, 12)
        )

        assert created.reservation_id is not None


class TestUserReservations:
    @pytest.mark.asyncio
    async def test_sorted_by_start_descending(self, user_id, place_ids):
        repo = ReservationCommandRepoImpl()
        for day in (2, 5, 3):
            await repo.insert(
                place_id=place_ids[0], user_id=user_id, time_range=_period(day, 9, 10)
            )

        reservations = await ReservationQueryRepoImpl().list_by_user_id(user_id=user_id)

        assert [r.start.day for r in reservations] == [5, 3, 2]

    @pytest.mark.asyncio
    async def test_in_range(self, user_id, place_ids):
        await ReservationCommandRepoImpl().insert(
            place_id=place_ids[0], user_id=user_id, time_range=_period(4, 9, 10)
        )
        repo = ReservationQueryRepoImpl()

        assert await repo.has_user_reservation_in_range(
            user_id=user_id, time_range=_period(4, 8, 11)
        )
        assert not await repo.has_user_reservation_in_range(
            user_id=user_id, time_range=_period(4, 10, 11)
        )

    @pytest.mark.asyncio
    async def test_update_and_delete(self, user_id, place_ids):
        command_repo = ReservationCommandRepoImpl()
        created = await command_repo.insert(
            place_id=place_ids[0], user_id=user_id, time_range=_period(6, 9, 10)
        )

        await command_repo.update(
            reservation_id=created.reservation_id,
            place_id=place_ids[1],
            time_range=_period(7, 9, 10),
        )
        [updated] = await ReservationQueryRepoImpl().list_by_user_id(user_id=user_id)
        assert updated.place_id == place_ids[1]
        assert updated.start == datetime(2025, 3, 7, 9)

        await command_repo.delete(reservation_id=created.reservation_id)
        assert await ReservationQueryRepoImpl().list_by_user_id(user_id=user_id) == []
