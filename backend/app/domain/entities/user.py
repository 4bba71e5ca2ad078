from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class User:
    """A registered campus user. Credentials are owned by the auth service."""

    name: str
    email: str
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, name: str | None = None, email: str | None = None) -> None:
        if name is not None:
            self.name = name
        if email is not None:
            self.email = email


@dataclass
class AuthStatus:
    """Result of an authentication check."""

    authenticated: bool
    user: User | None = None
