from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.exception.exceptions import DomainError, StorageError
from src.platform.logging.loguru_io import Logger
from src.service.portal.app.interface.i_shop_item_command_repo import IShopItemCommandRepo


class DeleteItemUseCase:
    def __init__(self, *, shop_item_command_repo: IShopItemCommandRepo) -> None:
        self.shop_item_command_repo = shop_item_command_repo

    @classmethod
    @inject
    def depends(
        cls,
        shop_item_command_repo: IShopItemCommandRepo = Depends(Provide['shop_item_command_repo']),
    ) -> Self:
        return cls(shop_item_command_repo=shop_item_command_repo)

    @Logger.io
    async def execute(self, *, item_id: int) -> None:
        try:
            await self.shop_item_command_repo.delete(item_id=item_id)
        except StorageError as e:
            raise DomainError('failed to delete item from shop') from e
