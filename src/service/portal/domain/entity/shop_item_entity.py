from typing import Optional

import attrs


@attrs.define
class ShopItem:
    name: str
    price: int
    description: str = ''
    item_id: Optional[int] = None
