from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.exception.exceptions import DomainError, StorageError
from src.platform.logging.loguru_io import Logger
from src.service.portal.app.interface.i_shop_item_query_repo import IShopItemQueryRepo
from src.service.portal.domain.entity.shop_item_entity import ShopItem


class ListShopItemsUseCase:
    def __init__(self, *, shop_item_query_repo: IShopItemQueryRepo) -> None:
        self.shop_item_query_repo = shop_item_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        shop_item_query_repo: IShopItemQueryRepo = Depends(Provide['shop_item_query_repo']),
    ) -> Self:
        return cls(shop_item_query_repo=shop_item_query_repo)

    @Logger.io
    async def execute(self) -> List[ShopItem]:
        try:
            return await self.shop_item_query_repo.list_items()
        except StorageError as e:
            raise DomainError('failed to get shop list') from e
