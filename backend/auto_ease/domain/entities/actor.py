"""Domain entity for actors — the clients and providers that submit service entry requests."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ActorRole(str, Enum):
    """Roles an actor can hold; each role is served by one strategy."""

    CLIENT = "client"
    PROVIDER = "provider"


@dataclass
class Actor:
    """An identity known to the actor directory."""

    id: str
    role: ActorRole
    email: str | None = None
    phone: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
