"""In-memory fakes for the repository ports, shared by the unit tests."""

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from auto_ease.application.interfaces import ActorDirectory, ServiceEntryRepository
from auto_ease.domain.entities import Actor, ActorRole, ServiceEntry


class FakeServiceEntryRepository(ServiceEntryRepository):
    """In-memory entry store; hands out copies so callers cannot mutate stored state."""

    def __init__(self):
        self._entries: dict[int, ServiceEntry] = {}
        self._next_id = 1
        self.save_calls = 0

    async def get_by_id(self, entry_id: int) -> ServiceEntry | None:
        entry = self._entries.get(entry_id)
        return replace(entry) if entry else None

    async def save(self, entry: ServiceEntry) -> ServiceEntry:
        self.save_calls += 1
        now = datetime.now(timezone.utc)
        stored = replace(entry)
        if stored.id is None:
            stored.id = self._next_id
            self._next_id += 1
            stored.created_at = now
        elif stored.id not in self._entries:
            raise ValueError(f"ServiceEntry {stored.id} not found")
        else:
            stored.created_at = self._entries[stored.id].created_at
        stored.updated_at = now
        self._entries[stored.id] = stored
        return replace(stored)

    async def claim(self, entry_id: int, provider_ref: str) -> ServiceEntry | None:
        stored = self._entries.get(entry_id)
        if stored is None or stored.is_claimed:
            return None
        stored.assign_provider(provider_ref)
        return replace(stored)

    async def list_entries(
        self,
        *,
        client_ref: str | None = None,
        provider_ref: str | None = None,
        claimed: bool | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[ServiceEntry]:
        entries = [
            e
            for e in self._entries.values()
            if (client_ref is None or e.client_ref == client_ref)
            and (provider_ref is None or e.provider_ref == provider_ref)
            and (claimed is None or e.is_claimed == claimed)
        ]
        entries.sort(key=lambda e: (-e.priority, e.id))
        return [replace(e) for e in entries[skip : skip + limit]]


class FakeActorDirectory(ActorDirectory):
    """In-memory actor directory."""

    def __init__(self, actors: list[Actor] | None = None):
        self._actors = {actor.id: actor for actor in actors or []}

    async def find_actor(self, actor_id: str) -> Actor | None:
        return self._actors.get(actor_id)

    async def create(self, actor: Actor) -> Actor:
        self._actors[actor.id] = actor
        return actor


@pytest.fixture
def entry_repository() -> FakeServiceEntryRepository:
    return FakeServiceEntryRepository()


@pytest.fixture
def actor_directory() -> FakeActorDirectory:
    return FakeActorDirectory(
        [
            Actor(id="c1", role=ActorRole.CLIENT),
            Actor(id="p1", role=ActorRole.PROVIDER),
            Actor(id="p2", role=ActorRole.PROVIDER),
        ]
    )
