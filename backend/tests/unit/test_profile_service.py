"""Unit tests for the ProfileService."""

import pytest

from app.application.interfaces import UserRepository
from app.application.services import ProfileService
from app.domain.entities import User
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError, ValidationError


class FakeUserRepository(UserRepository):
    def __init__(self):
        self._users = {
            1: User(id=1, name="Ada", email="ada@campus.edu"),
            2: User(id=2, name="Grace", email="grace@campus.edu"),
        }

    async def get_by_id(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    async def get_by_email(self, email: str) -> User | None:
        return next((u for u in self._users.values() if u.email == email), None)

    async def create(self, user: User) -> User:
        user.id = max(self._users) + 1
        self._users[user.id] = user
        return user

    async def update(self, user: User) -> User:
        self._users[user.id] = user
        return user


@pytest.fixture
def service() -> ProfileService:
    return ProfileService(FakeUserRepository())


@pytest.mark.asyncio
async def test_get_profile(service: ProfileService):
    user = await service.get_profile(1)
    assert user.email == "ada@campus.edu"


@pytest.mark.asyncio
async def test_get_profile_not_found(service: ProfileService):
    with pytest.raises(EntityNotFoundError):
        await service.get_profile(42)


@pytest.mark.asyncio
async def test_update_profile_trims_values(service: ProfileService):
    user = await service.update_profile(1, "  Ada Lovelace ", " ada@campus.edu ")
    assert user.name == "Ada Lovelace"
    assert user.email == "ada@campus.edu"


@pytest.mark.asyncio
async def test_update_profile_requires_both_fields(service: ProfileService):
    with pytest.raises(ValidationError, match="Name and email are required"):
        await service.update_profile(1, "   ", "ada@campus.edu")


@pytest.mark.asyncio
async def test_update_profile_rejects_email_of_another_user(service: ProfileService):
    with pytest.raises(DuplicateEntityError):
        await service.update_profile(1, "Ada", "grace@campus.edu")
