from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from src.platform.logging.loguru_io import Logger
from src.service.portal.app.command.create_item_use_case import CreateItemUseCase
from src.service.portal.app.command.delete_item_use_case import DeleteItemUseCase
from src.service.portal.app.query.list_shop_items_use_case import ListShopItemsUseCase
from src.service.portal.domain.value_object.principal import Principal
from src.service.portal.driving_adapter.http_controller.auth.role_auth import require_shop_editor
from src.service.portal.driving_adapter.http_controller.request_body import body_after
from src.service.portal.driving_adapter.http_controller.schema.envelope import OkResponse
from src.service.portal.driving_adapter.http_controller.schema.shop_schema import (
    CreateItemRequest,
    CreateItemResponse,
    DeleteItemRequest,
    ShopItemSchema,
    ShopListResponse,
)
from src.service.portal.driving_adapter.http_controller.user_controller import get_principal


router = APIRouter()


def _body_schema(model: type[BaseModel]) -> dict[str, Any]:
    """Document a body that the route decodes itself."""
    return {
        'requestBody': {
            'required': True,
            'content': {'application/json': {'schema': model.model_json_schema()}},
        }
    }


@router.get('')
@Logger.io
async def list_items(
    principal: Principal = Depends(get_principal),
    use_case: ListShopItemsUseCase = Depends(ListShopItemsUseCase.depends),
) -> ShopListResponse:
    items = await use_case.execute()
    return ShopListResponse(
        items=[
            ShopItemSchema(
                item_id=item.item_id or 0,
                name=item.name,
                description=item.description,
                price=item.price,
            )
            for item in items
        ]
    )


@router.post('/item', openapi_extra=_body_schema(CreateItemRequest))
@Logger.io
async def create_item(
    request: CreateItemRequest = Depends(body_after(require_shop_editor, CreateItemRequest)),
    principal: Principal = Depends(require_shop_editor),
    use_case: CreateItemUseCase = Depends(CreateItemUseCase.depends),
) -> CreateItemResponse:
    item = await use_case.execute(
        name=request.name, description=request.description, price=request.price
    )
    return CreateItemResponse(item_id=item.item_id or 0)


@router.delete('/item', openapi_extra=_body_schema(DeleteItemRequest))
@Logger.io
async def delete_item(
    request: DeleteItemRequest = Depends(body_after(require_shop_editor, DeleteItemRequest)),
    principal: Principal = Depends(require_shop_editor),
    use_case: DeleteItemUseCase = Depends(DeleteItemUseCase.depends),
) -> OkResponse:
    await use_case.execute(item_id=request.item_id)
    Logger.base.info(f'🗑️  [Shop] item {request.item_id} deleted by user {principal.user_id}')
    return OkResponse()
