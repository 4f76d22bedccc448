from abc import ABC, abstractmethod
from typing import Optional

from src.service.portal.domain.entity.user_entity import UserEntity


class IUserQueryRepo(ABC):
    """User read operations"""

    @abstractmethod
    async def get_by_login(self, *, login: str) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def verify_password(self, *, login: str, plain_password: str) -> Optional[UserEntity]:
        """Return the user when login and password match, None otherwise."""
        pass
