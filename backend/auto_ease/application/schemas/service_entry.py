"""Pydantic DTOs (Data Transfer Objects) for the ServiceEntry feature."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field

from auto_ease.domain.entities import EntryStatus

# Integer columns are 32-bit on PostgreSQL
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class ClientCreationRequest(BaseModel):
    """Client-role request shape — every field of a new entry, all optional."""

    model_config = {"extra": "forbid"}

    client_ref: str | None = Field(None, max_length=50, examples=["c1"])
    entry_kind: str | None = Field(None, max_length=100, examples=["oil-change"])
    car_make: str | None = Field(None, max_length=100, examples=["Toyota"])
    car_model: str | None = Field(None, max_length=100, examples=["Corolla"])
    car_year: int | None = Field(None, ge=_INT_MIN, le=_INT_MAX, examples=[2017])
    car_vin: str | None = Field(None, max_length=17)
    description: str | None = None
    service_date: date | None = None
    location: str | None = Field(None, max_length=255)
    priority: int | None = Field(None, ge=_INT_MIN, le=_INT_MAX, examples=[3])
    cost: Decimal | None = Field(None, max_digits=12, decimal_places=2)
    note: str | None = None


class ProviderLookupRequest(BaseModel):
    """Provider-role request shape — the entry to claim and the claiming provider."""

    model_config = {"extra": "forbid"}

    provider_ref: str | None = Field(None, max_length=50, examples=["p1"])
    entry_id: int | None = Field(None, ge=_INT_MIN, le=_INT_MAX, examples=[1])


RoleRequest = ClientCreationRequest | ProviderLookupRequest


class ProcessServiceEntryRequest(BaseModel):
    """Inbound envelope — the payload stays untyped until the actor role is known."""

    actor_id: str = Field(..., min_length=1, max_length=50)
    payload: dict[str, Any] | None = Field(
        None, examples=[{"client_ref": "c1", "entry_kind": "oil-change", "priority": 3}],
    )


class ServiceEntryResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    client_ref: str | None
    provider_ref: str | None
    status: EntryStatus
    entry_kind: str | None
    car_make: str | None
    car_model: str | None
    car_year: int | None
    car_vin: str | None
    description: str | None
    service_date: date | None
    location: str | None
    priority: int
    cost: Decimal | None
    note: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
