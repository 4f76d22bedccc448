from typing import List

import asyncpg

from src.platform.database.asyncpg_setting import get_asyncpg_pool
from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger
from src.service.portal.app.interface.i_shop_item_query_repo import IShopItemQueryRepo
from src.service.portal.domain.entity.shop_item_entity import ShopItem


class ShopItemQueryRepoImpl(IShopItemQueryRepo):
    @Logger.io
    async def list_items(self) -> List[ShopItem]:
        op = 'storage.shop.list_items'
        try:
            async with (await get_asyncpg_pool()).acquire() as conn:
                rows = await conn.fetch(
                    "SELECT item_id, name, COALESCE(description, '') AS description, price "
                    'FROM shop_item ORDER BY item_id'
                )
        except (asyncpg.PostgresError, OSError) as e:
            raise StorageError(op, e) from e

        return [
            ShopItem(
                item_id=row['item_id'],
                name=row['name'],
                description=row['description'],
                price=row['price'],
            )
            for row in rows
        ]
