"""Abstract repository interface for users."""

from abc import ABC, abstractmethod

from app.domain.entities import User


class UserRepository(ABC):
    """Port for user persistence. Passwords never pass through here."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        ...

    @abstractmethod
    async def get_by_email(self, email: str) -> User | None:
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        ...

    @abstractmethod
    async def update(self, user: User) -> User:
        ...
