from abc import ABC, abstractmethod

from src.service.portal.domain.entity.shop_item_entity import ShopItem


class IShopItemCommandRepo(ABC):
    @abstractmethod
    async def insert(self, *, item: ShopItem) -> ShopItem:
        pass

    @abstractmethod
    async def delete(self, *, item_id: int) -> None:
        pass
