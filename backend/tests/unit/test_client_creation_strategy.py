"""Unit tests for the ClientCreationStrategy."""

from datetime import date
from decimal import Decimal

import pytest

from auto_ease.application.schemas import ClientCreationRequest
from auto_ease.application.services import ClientCreationStrategy
from auto_ease.domain.entities import ActorRole, EntryStatus


@pytest.fixture
def strategy(entry_repository) -> ClientCreationStrategy:
    return ClientCreationStrategy(entry_repository)


def test_strategy_serves_client_role():
    assert ClientCreationStrategy.role is ActorRole.CLIENT
    assert ClientCreationStrategy.request_type is ClientCreationRequest


@pytest.mark.asyncio
async def test_creates_entry_with_assigned_id_and_no_provider(strategy):
    entry = await strategy.process(
        ClientCreationRequest(client_ref="c1", entry_kind="oil-change", priority=3)
    )

    assert entry.id is not None
    assert entry.client_ref == "c1"
    assert entry.provider_ref is None
    assert entry.entry_kind == "oil-change"
    assert entry.priority == 3
    assert entry.status is EntryStatus.UNCLAIMED


@pytest.mark.asyncio
async def test_copies_every_request_field(strategy):
    request = ClientCreationRequest(
        client_ref="c1",
        entry_kind="brake-repair",
        car_make="Skoda",
        car_model="Octavia",
        car_year=2016,
        car_vin="TMBJJ7NE0G0123456",
        description="Squealing front brakes",
        service_date=date(2026, 11, 2),
        location="Ljubljana",
        priority=5,
        cost=Decimal("120.50"),
        note="Call before starting",
    )

    entry = await strategy.process(request)

    assert entry.car_make == "Skoda"
    assert entry.car_model == "Octavia"
    assert entry.car_year == 2016
    assert entry.car_vin == "TMBJJ7NE0G0123456"
    assert entry.description == "Squealing front brakes"
    assert entry.service_date == date(2026, 11, 2)
    assert entry.location == "Ljubljana"
    assert entry.cost == Decimal("120.50")
    assert entry.note == "Call before starting"


@pytest.mark.asyncio
async def test_absent_numeric_fields_keep_defaults(strategy):
    entry = await strategy.process(ClientCreationRequest(client_ref="c1"))

    assert entry.car_year is None
    assert entry.priority == 0


@pytest.mark.asyncio
async def test_none_request_yields_blank_record(strategy, entry_repository):
    entry = await strategy.process(None)

    assert entry.id is not None
    assert entry.client_ref is None
    assert entry.provider_ref is None
    assert entry.entry_kind is None
    assert entry.priority == 0
    assert entry_repository.save_calls == 1


@pytest.mark.asyncio
async def test_timestamps_populated_by_store(strategy):
    entry = await strategy.process(ClientCreationRequest(client_ref="c1"))

    assert entry.created_at is not None
    assert entry.updated_at is not None


@pytest.mark.asyncio
async def test_each_request_gets_a_fresh_id(strategy):
    first = await strategy.process(ClientCreationRequest(client_ref="c1"))
    second = await strategy.process(ClientCreationRequest(client_ref="c1"))

    assert first.id != second.id
