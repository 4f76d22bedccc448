import asyncpg

from src.platform.database.asyncpg_setting import get_asyncpg_pool
from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger
from src.service.portal.app.interface.i_shop_item_command_repo import IShopItemCommandRepo
from src.service.portal.domain.entity.shop_item_entity import ShopItem


class ShopItemCommandRepoImpl(IShopItemCommandRepo):
    @Logger.io
    async def insert(self, *, item: ShopItem) -> ShopItem:
        op = 'storage.shop.insert_item'
        try:
            async with (await get_asyncpg_pool()).acquire() as conn:
                item.item_id = await conn.fetchval(
                    'INSERT INTO shop_item (name, description, price) VALUES ($1, $2, $3) '
                    'RETURNING item_id',
                    item.name,
                    item.description,
                    item.price,
                )
        except (asyncpg.PostgresError, OSError) as e:
            raise StorageError(op, e) from e

        return item

    @Logger.io
    async def delete(self, *, item_id: int) -> None:
        op = 'storage.shop.delete_item'
        try:
            async with (await get_asyncpg_pool()).acquire() as conn:
                await conn.execute('DELETE FROM shop_item WHERE item_id = $1', item_id)
        except (asyncpg.PostgresError, OSError) as e:
            raise StorageError(op, e) from e
