from abc import ABC, abstractmethod
from typing import List

from src.service.portal.domain.entity.shop_item_entity import ShopItem


class IShopItemQueryRepo(ABC):
    @abstractmethod
    async def list_items(self) -> List[ShopItem]:
        pass
