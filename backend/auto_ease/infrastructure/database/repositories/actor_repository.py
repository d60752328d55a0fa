"""Concrete actor directory backed by SQLAlchemy."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from auto_ease.application.interfaces import ActorDirectory
from auto_ease.domain.entities import Actor, ActorRole
from auto_ease.domain.exceptions import DuplicateEntityError
from auto_ease.infrastructure.database.models import ActorModel
from auto_ease.infrastructure.database.utc import as_utc


class SQLAlchemyActorDirectory(ActorDirectory):
    """Implements the ActorDirectory port using SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    def _to_entity(self, model: ActorModel) -> Actor:
        return Actor(
            id=model.id,
            role=ActorRole(model.role),
            email=model.email,
            phone=model.phone,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    async def find_actor(self, actor_id: str) -> Actor | None:
        async with self._session_factory() as session:
            model = await session.get(ActorModel, actor_id)
            return self._to_entity(model) if model else None

    async def create(self, actor: Actor) -> Actor:
        try:
            async with self._session_factory() as session, session.begin():
                model = ActorModel(
                    id=actor.id,
                    role=actor.role.value,
                    email=actor.email,
                    phone=actor.phone,
                    created_at=actor.created_at,
                    updated_at=actor.updated_at,
                )
                session.add(model)
                await session.flush()
                return self._to_entity(model)
        except IntegrityError as exc:
            # Lost a race with a concurrent registration of the same id
            raise DuplicateEntityError("Actor", "id", actor.id) from exc
