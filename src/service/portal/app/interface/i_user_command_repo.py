from abc import ABC, abstractmethod

from src.service.portal.domain.entity.user_entity import UserEntity


class IUserCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, user: UserEntity) -> UserEntity:
        pass
