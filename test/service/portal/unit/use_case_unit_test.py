"""
Use case unit tests with AsyncMock repositories.

Storage failures are turned into caller-safe domain errors; domain errors the
repositories raise themselves pass through unchanged.
"""

from datetime import datetime
from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import (
    DomainError,
    LoginError,
    PlaceTakenError,
    StorageError,
)
from src.service.portal.app.command.create_item_use_case import CreateItemUseCase
from src.service.portal.app.command.create_reservation_use_case import CreateReservationUseCase
from src.service.portal.app.command.delete_item_use_case import DeleteItemUseCase
from src.service.portal.app.command.update_reservation_use_case import UpdateReservationUseCase
from src.service.portal.app.query.list_actual_places_use_case import ListActualPlacesUseCase
from src.service.portal.app.query.list_shop_items_use_case import ListShopItemsUseCase
from src.service.portal.app.query.log_in_use_case import LogInUseCase
from src.service.portal.domain.entity.shop_item_entity import ShopItem
from src.service.portal.domain.entity.user_entity import UserEntity
from src.service.portal.domain.value_object.time_range import TimeRange


PERIOD = TimeRange(start=datetime(2025, 3, 1, 10), finish=datetime(2025, 3, 1, 12))


def _storage_error(op: str = 'storage.test') -> StorageError:
    return StorageError(op, OSError('connection reset by peer'))


class TestCreateReservationUseCase:
    @pytest.fixture
    def place_query_repo(self) -> AsyncMock:
        repo = AsyncMock()
        repo.get_place_name = AsyncMock(return_value='Desk 1')
        return repo

    @pytest.fixture
    def reservation_command_repo(self) -> AsyncMock:
        return AsyncMock()

    @pytest.mark.asyncio
    async def test_serializable_flag_is_forwarded(self, place_query_repo, reservation_command_repo):
        use_case = CreateReservationUseCase(
            place_query_repo=place_query_repo,
            reservation_command_repo=reservation_command_repo,
            serializable_insert=True,
        )

        await use_case.execute(user_id=1, place_id=2, time_range=PERIOD)

        reservation_command_repo.insert.assert_awaited_once_with(
            place_id=2, user_id=1, time_range=PERIOD, serializable=True
        )

    @pytest.mark.asyncio
    async def test_unknown_place(self, place_query_repo, reservation_command_repo):
        place_query_repo.get_place_name = AsyncMock(return_value=None)
        use_case = CreateReservationUseCase(
            place_query_repo=place_query_repo, reservation_command_repo=reservation_command_repo
        )

        with pytest.raises(DomainError, match='place not found'):
            await use_case.execute(user_id=1, place_id=99, time_range=PERIOD)
        reservation_command_repo.insert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_place_taken_passes_through(self, place_query_repo, reservation_command_repo):
        reservation_command_repo.insert = AsyncMock(side_effect=PlaceTakenError())
        use_case = CreateReservationUseCase(
            place_query_repo=place_query_repo, reservation_command_repo=reservation_command_repo
        )

        with pytest.raises(PlaceTakenError, match='place is already taken'):
            await use_case.execute(user_id=1, place_id=2, time_range=PERIOD)

    @pytest.mark.asyncio
    async def test_storage_error_is_generic(self, place_query_repo, reservation_command_repo):
        reservation_command_repo.insert = AsyncMock(side_effect=_storage_error())
        use_case = CreateReservationUseCase(
            place_query_repo=place_query_repo, reservation_command_repo=reservation_command_repo
        )

        with pytest.raises(DomainError) as exc_info:
            await use_case.execute(user_id=1, place_id=2, time_range=PERIOD)

        assert exc_info.value.message == 'failed to create reservation'
        assert 'connection reset' not in exc_info.value.message


class TestStorageFailureMessages:
    @pytest.mark.asyncio
    async def test_update_reservation(self):
        repo = AsyncMock()
        repo.update = AsyncMock(side_effect=_storage_error())

        with pytest.raises(DomainError, match='failed to update reservation'):
            await UpdateReservationUseCase(reservation_command_repo=repo).execute(
                reservation_id=1, place_id=1, time_range=PERIOD
            )

    @pytest.mark.asyncio
    async def test_list_actual_places(self):
        repo = AsyncMock()
        repo.get_actual_places = AsyncMock(side_effect=_storage_error())

        with pytest.raises(DomainError, match='failed to get place list'):
            await ListActualPlacesUseCase(place_query_repo=repo).list_actual_places(
                time_range=PERIOD
            )

    @pytest.mark.asyncio
    async def test_delete_item(self):
        repo = AsyncMock()
        repo.delete = AsyncMock(side_effect=_storage_error())

        with pytest.raises(DomainError, match='failed to delete item from shop'):
            await DeleteItemUseCase(shop_item_command_repo=repo).execute(item_id=1)

    @pytest.mark.asyncio
    async def test_create_item(self):
        repo = AsyncMock()
        repo.insert = AsyncMock(side_effect=_storage_error())

        with pytest.raises(DomainError, match='failed to add item to shop'):
            await CreateItemUseCase(shop_item_command_repo=repo).execute(
                name='Mug', description='', price=1
            )

    @pytest.mark.asyncio
    async def test_list_shop_items(self):
        repo = AsyncMock()
        repo.list_items = AsyncMock(side_effect=_storage_error())

        with pytest.raises(DomainError, match='failed to get shop list'):
            await ListShopItemsUseCase(shop_item_query_repo=repo).execute()


class TestCreateItemUseCase:
    @pytest.mark.asyncio
    async def test_builds_entity(self):
        repo = AsyncMock()
        repo.insert = AsyncMock(side_effect=lambda item: ShopItem(
            name=item.name, price=item.price, description=item.description, item_id=4
        ))

        created = await CreateItemUseCase(shop_item_command_repo=repo).execute(
            name='Mug', description='Blue', price=150
        )

        assert created.item_id == 4
        repo.insert.assert_awaited_once_with(item=ShopItem(name='Mug', price=150, description='Blue'))


class TestLogInUseCase:
    @pytest.mark.asyncio
    async def test_unknown_login_and_wrong_password_look_the_same(self):
        repo = AsyncMock()
        repo.verify_password = AsyncMock(return_value=None)

        with pytest.raises(LoginError, match='invalid login or password'):
            await LogInUseCase(user_query_repo=repo).authenticate(login='x', password='y')

    @pytest.mark.asyncio
    async def test_returns_user(self):
        user = UserEntity(login='user', username='User', user_id=1)
        repo = AsyncMock()
        repo.verify_password = AsyncMock(return_value=user)

        assert await LogInUseCase(user_query_repo=repo).authenticate(login='user', password='p') is user
