"""Domain entity for service entries — a client's request for vehicle service work."""

from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum


class EntryStatus(str, Enum):
    """Claim state of a service entry, derived from its provider reference."""

    UNCLAIMED = "unclaimed"
    CLAIMED = "claimed"


@dataclass
class ServiceEntry:
    """Core domain entity for a unit of requested vehicle service work.

    ``id``, ``created_at`` and ``updated_at`` stay unset until the entry store
    persists the record for the first time.
    """

    client_ref: str | None = None
    provider_ref: str | None = None
    entry_kind: str | None = None
    car_make: str | None = None
    car_model: str | None = None
    car_year: int | None = None
    car_vin: str | None = None
    description: str | None = None
    service_date: date | None = None
    location: str | None = None
    priority: int = 0
    cost: Decimal | None = None
    note: str | None = None
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def status(self) -> EntryStatus:
        if self.provider_ref is None:
            return EntryStatus.UNCLAIMED
        return EntryStatus.CLAIMED

    @property
    def is_claimed(self) -> bool:
        return self.status is EntryStatus.CLAIMED

    def assign_provider(self, provider_ref: str) -> None:
        """Set the servicing provider and refresh the updated_at timestamp."""
        self.provider_ref = provider_ref
        self.updated_at = datetime.now(timezone.utc)
