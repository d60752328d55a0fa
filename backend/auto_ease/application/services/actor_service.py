"""Application service (use case) for actor registration and lookup."""

import logging

from auto_ease.application.interfaces import ActorDirectory
from auto_ease.application.schemas.actor import ActorCreate
from auto_ease.domain.entities import Actor
from auto_ease.domain.exceptions import ActorNotFoundError, DuplicateEntityError

logger = logging.getLogger(__name__)


class ActorService:
    def __init__(self, directory: ActorDirectory):
        self._directory = directory

    async def get_actor(self, actor_id: str) -> Actor:
        actor = await self._directory.find_actor(actor_id)
        if actor is None:
            raise ActorNotFoundError(actor_id)
        return actor

    async def register_actor(self, data: ActorCreate) -> Actor:
        if await self._directory.find_actor(data.id) is not None:
            raise DuplicateEntityError("Actor", "id", data.id)

        actor = await self._directory.create(
            Actor(id=data.id, role=data.role, email=data.email, phone=data.phone)
        )
        logger.info("Registered %s actor %s", actor.role.value, actor.id)
        return actor
