"""Abstract actor directory interface (port) — resolves actor identities to roles."""

from abc import ABC, abstractmethod

from auto_ease.domain.entities import Actor


class ActorDirectory(ABC):
    """Port for actor lookup and registration."""

    @abstractmethod
    async def find_actor(self, actor_id: str) -> Actor | None:
        """Resolve an actor by identifier, or None if unknown."""
        ...

    @abstractmethod
    async def create(self, actor: Actor) -> Actor:
        """Persist a new actor and return it; raises DuplicateEntityError if the id is taken."""
        ...
