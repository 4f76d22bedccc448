from fastapi import Depends
from opentelemetry import trace

from src.platform.exception.exceptions import ForbiddenError
from src.service.portal.domain.entity.user_entity import SHOP_EDITOR_ROLES
from src.service.portal.domain.value_object.principal import Principal
from src.service.portal.driving_adapter.http_controller.user_controller import get_principal


class RoleAuthStrategy:
    @staticmethod
    def can_edit_shop(principal: Principal) -> bool:
        return principal.has_any_role(SHOP_EDITOR_ROLES)


async def require_shop_editor(principal: Principal = Depends(get_principal)) -> Principal:
    tracer = trace.get_tracer(__name__)
    with tracer.start_as_current_span(
        'auth.require_shop_editor',
        attributes={'user.id': principal.user_id, 'user.role': principal.role},
    ):
        if not RoleAuthStrategy.can_edit_shop(principal):
            raise ForbiddenError()
        return principal
