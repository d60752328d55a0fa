"""SQLAlchemy ORM base shared by the service entry and actor tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models; Base.metadata drives table creation."""
