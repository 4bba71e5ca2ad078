"""Application service for reading and editing the signed-in user's profile."""

from app.application.interfaces import UserRepository
from app.domain.entities import User
from app.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    ValidationError,
)


class ProfileService:
    def __init__(self, repository: UserRepository):
        self._repository = repository

    async def get_profile(self, user_id: int) -> User:
        user = await self._repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return user

    async def update_profile(self, user_id: int, name: str, email: str) -> User:
        name, email = name.strip(), email.strip()
        if not name or not email:
            raise ValidationError("Name and email are required")

        existing = await self._repository.get_by_email(email)
        if existing is not None and existing.id != user_id:
            raise DuplicateEntityError("User", "email", email)

        user = await self.get_profile(user_id)
        user.update(name=name, email=email)
        return await self._repository.update(user)
