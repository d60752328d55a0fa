from .base import Base
from .session import engine, async_session_factory, build_session_factory
from .models import ActorModel, ServiceEntryModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "build_session_factory",
    "ActorModel",
    "ServiceEntryModel",
]
