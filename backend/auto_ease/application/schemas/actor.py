"""Pydantic DTOs for actor registration and lookup."""

from datetime import datetime

from pydantic import BaseModel, Field

from auto_ease.domain.entities import ActorRole


class ActorCreate(BaseModel):
    """Schema for registering a new actor."""

    id: str = Field(..., min_length=1, max_length=50, examples=["c1"])
    role: ActorRole
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=50)


class ActorResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    role: ActorRole
    email: str | None
    phone: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
