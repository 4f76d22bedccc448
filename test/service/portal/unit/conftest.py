"""
Conftest for controller unit tests - no database.

The unit app wires the container but never opens a pool; every use case and the
principal are replaced through FastAPI dependency overrides.
"""

from collections.abc import Generator
from typing import Any, Callable

from fastapi.testclient import TestClient
import pytest

from src.service.portal.domain.entity.user_entity import UserRole
from src.service.portal.domain.value_object.principal import Principal
from src.service.portal.driving_adapter.http_controller.user_controller import get_principal


@pytest.fixture
def unit_client() -> Generator[TestClient, None, None]:
    from test.test_main import unit_app

    with TestClient(unit_app, raise_server_exceptions=False) as test_client:
        yield test_client

    unit_app.dependency_overrides.clear()


@pytest.fixture
def override() -> Callable[[Any, Any], None]:
    """Register a dependency override that returns ``value``."""
    from test.test_main import unit_app

    def _override(dependency: Any, value: Any) -> None:
        unit_app.dependency_overrides[dependency] = lambda: value

    return _override


@pytest.fixture
def login_as(override: Callable[[Any, Any], None]) -> Callable[[int], Principal]:
    def _login_as(role: int) -> Principal:
        principal = Principal(user_id=42, username='Test User', role=role)
        override(get_principal, principal)
        return principal

    return _login_as


@pytest.fixture
def editor(login_as: Callable[[int], Principal]) -> Principal:
    return login_as(UserRole.SHOP_EDITOR)


@pytest.fixture
def regular_user(login_as: Callable[[int], Principal]) -> Principal:
    return login_as(UserRole.USER)
