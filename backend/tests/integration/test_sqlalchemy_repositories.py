"""Integration tests for the SQLAlchemy entry store and actor directory on SQLite."""

import asyncio
from datetime import date
from decimal import Decimal

import pytest

from auto_ease.application.schemas import ActorCreate
from auto_ease.application.services import ActorService
from auto_ease.domain.entities import Actor, ActorRole, ServiceEntry
from auto_ease.domain.exceptions import DuplicateEntityError
from auto_ease.infrastructure.database.repositories import (
    SQLAlchemyActorDirectory,
    SQLAlchemyServiceEntryRepository,
)


@pytest.fixture
def repository(session_factory) -> SQLAlchemyServiceEntryRepository:
    return SQLAlchemyServiceEntryRepository(session_factory)


@pytest.fixture
def directory(session_factory) -> SQLAlchemyActorDirectory:
    return SQLAlchemyActorDirectory(session_factory)


@pytest.mark.asyncio
async def test_save_inserts_and_assigns_id_and_timestamps(repository):
    stored = await repository.save(
        ServiceEntry(
            client_ref="c1",
            entry_kind="oil-change",
            service_date=date(2026, 11, 2),
            cost=Decimal("89.90"),
            priority=3,
        )
    )

    assert stored.id is not None
    assert stored.created_at is not None
    assert stored.updated_at is not None

    fetched = await repository.get_by_id(stored.id)
    assert fetched.client_ref == "c1"
    assert fetched.provider_ref is None
    assert fetched.service_date == date(2026, 11, 2)
    assert fetched.cost == Decimal("89.90")
    assert fetched.priority == 3


@pytest.mark.asyncio
async def test_save_update_keeps_id_and_created_at(repository):
    stored = await repository.save(ServiceEntry(client_ref="c1", note="first"))
    stored.note = "second"

    updated = await repository.save(stored)

    assert updated.id == stored.id
    assert updated.note == "second"
    assert updated.created_at == stored.created_at
    assert updated.updated_at >= stored.updated_at


@pytest.mark.asyncio
async def test_save_update_of_unknown_entry_fails(repository):
    with pytest.raises(ValueError):
        await repository.save(ServiceEntry(id=999, client_ref="c1"))


@pytest.mark.asyncio
async def test_get_by_id_missing(repository):
    assert await repository.get_by_id(12345) is None


@pytest.mark.asyncio
async def test_claim_sets_provider_once(repository):
    stored = await repository.save(ServiceEntry(client_ref="c1"))

    claimed = await repository.claim(stored.id, "p1")
    second = await repository.claim(stored.id, "p2")

    assert claimed.provider_ref == "p1"
    assert claimed.created_at == stored.created_at
    assert claimed.updated_at >= stored.updated_at
    assert second is None
    assert (await repository.get_by_id(stored.id)).provider_ref == "p1"


@pytest.mark.asyncio
async def test_claim_missing_entry(repository):
    assert await repository.claim(404, "p1") is None


@pytest.mark.asyncio
async def test_concurrent_claims_only_one_wins(repository):
    stored = await repository.save(ServiceEntry(client_ref="c1"))

    results = await asyncio.gather(
        repository.claim(stored.id, "p1"),
        repository.claim(stored.id, "p2"),
    )

    winners = [r for r in results if r is not None]
    assert len(winners) == 1
    assert (await repository.get_by_id(stored.id)).provider_ref == winners[0].provider_ref


@pytest.mark.asyncio
async def test_list_entries_filters_and_orders(repository):
    await repository.save(ServiceEntry(client_ref="c1", priority=1))
    high = await repository.save(ServiceEntry(client_ref="c1", priority=9))
    await repository.save(ServiceEntry(client_ref="c2", priority=5))
    await repository.claim(high.id, "p1")

    everything = await repository.list_entries()
    for_c1 = await repository.list_entries(client_ref="c1")
    for_p1 = await repository.list_entries(provider_ref="p1")
    open_entries = await repository.list_entries(claimed=False)

    assert [e.priority for e in everything] == [9, 5, 1]
    assert [e.priority for e in for_c1] == [9, 1]
    assert [e.id for e in for_p1] == [high.id]
    assert [e.priority for e in open_entries] == [5, 1]
    assert len(await repository.list_entries(skip=1, limit=1)) == 1


@pytest.mark.asyncio
async def test_actor_directory_round_trip(directory):
    await directory.create(Actor(id="p1", role=ActorRole.PROVIDER, phone="+386 1 234 5678"))

    found = await directory.find_actor("p1")

    assert found.role is ActorRole.PROVIDER
    assert found.phone == "+386 1 234 5678"
    assert await directory.find_actor("nobody") is None


@pytest.mark.asyncio
async def test_actor_directory_rejects_taken_id(directory):
    await directory.create(Actor(id="c1", role=ActorRole.CLIENT))

    with pytest.raises(DuplicateEntityError) as exc_info:
        await directory.create(Actor(id="c1", role=ActorRole.PROVIDER))

    assert exc_info.value.value == "c1"
    assert (await directory.find_actor("c1")).role is ActorRole.CLIENT


@pytest.mark.asyncio
async def test_concurrent_registrations_of_one_id(directory):
    service = ActorService(directory)
    data = ActorCreate(id="garage-7", role=ActorRole.PROVIDER)

    results = await asyncio.gather(
        service.register_actor(data),
        service.register_actor(data),
        return_exceptions=True,
    )

    assert len([r for r in results if isinstance(r, Actor)]) == 1
    assert len([r for r in results if isinstance(r, DuplicateEntityError)]) == 1
