"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.portal.app.command import (
    create_item_use_case,
    create_reservation_use_case,
    delete_item_use_case,
    delete_reservation_use_case,
    update_reservation_use_case,
)
from src.service.portal.app.query import (
    list_actual_places_use_case,
    list_shop_items_use_case,
    log_in_use_case,
    user_reservation_query_use_case,
)
from src.service.portal.driving_adapter.http_controller import user_controller


WIRE_MODULES: list[ModuleType] = [
    create_item_use_case,
    create_reservation_use_case,
    delete_item_use_case,
    delete_reservation_use_case,
    update_reservation_use_case,
    list_actual_places_use_case,
    list_shop_items_use_case,
    log_in_use_case,
    user_reservation_query_use_case,
    user_controller,
]
