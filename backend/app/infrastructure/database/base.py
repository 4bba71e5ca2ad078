"""Declarative base shared by the users and articles tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Every ORM model registers its table on ``Base.metadata``."""
