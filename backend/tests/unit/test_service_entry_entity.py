"""Unit tests for the ServiceEntry domain entity."""

from auto_ease.domain.entities import EntryStatus, ServiceEntry


def test_new_entry_defaults():
    entry = ServiceEntry()

    assert entry.id is None
    assert entry.created_at is None
    assert entry.priority == 0
    assert entry.car_year is None
    assert entry.status is EntryStatus.UNCLAIMED
    assert entry.is_claimed is False


def test_assign_provider_claims_and_touches_updated_at():
    entry = ServiceEntry(client_ref="c1")

    entry.assign_provider("p1")

    assert entry.provider_ref == "p1"
    assert entry.status is EntryStatus.CLAIMED
    assert entry.updated_at is not None
    assert entry.created_at is None
