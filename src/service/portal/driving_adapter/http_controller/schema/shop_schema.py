from typing import List

from pydantic import BaseModel, Field

from src.service.portal.driving_adapter.http_controller.schema.envelope import OkResponse


class CreateItemRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ''
    price: int = Field(..., ge=0)


class DeleteItemRequest(BaseModel):
    item_id: int = Field(..., gt=0)

    model_config = {'json_schema_extra': {'example': {'item_id': 1}}}


class ShopItemSchema(BaseModel):
    item_id: int
    name: str
    description: str
    price: int


class ShopListResponse(OkResponse):
    items: List[ShopItemSchema]


class CreateItemResponse(OkResponse):
    item_id: int
