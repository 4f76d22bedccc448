"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.portal.driven_adapter.repo.place_query_repo_impl import PlaceQueryRepoImpl
from src.service.portal.driven_adapter.repo.reservation_command_repo_impl import (
    ReservationCommandRepoImpl,
)
from src.service.portal.driven_adapter.repo.reservation_query_repo_impl import (
    ReservationQueryRepoImpl,
)
from src.service.portal.driven_adapter.repo.shop_item_command_repo_impl import (
    ShopItemCommandRepoImpl,
)
from src.service.portal.driven_adapter.repo.shop_item_query_repo_impl import (
    ShopItemQueryRepoImpl,
)
from src.service.portal.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.portal.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.portal.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.portal.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Security
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    jwt_auth = providers.Singleton(JwtAuth, config=config_service)

    # Repositories (stateless - acquire a pooled connection per call)
    user_query_repo = providers.Singleton(UserQueryRepoImpl, password_hasher=password_hasher)
    user_command_repo = providers.Singleton(UserCommandRepoImpl)
    place_query_repo = providers.Singleton(PlaceQueryRepoImpl)
    reservation_command_repo = providers.Singleton(ReservationCommandRepoImpl)
    reservation_query_repo = providers.Singleton(ReservationQueryRepoImpl)
    shop_item_command_repo = providers.Singleton(ShopItemCommandRepoImpl)
    shop_item_query_repo = providers.Singleton(ShopItemQueryRepoImpl)


container = Container()


def cleanup() -> None:
    container.reset_singletons()
