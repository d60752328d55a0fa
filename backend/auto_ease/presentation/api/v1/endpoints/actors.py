"""Actor registration and lookup endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from auto_ease.application.schemas.actor import ActorCreate, ActorResponse
from auto_ease.application.services import ActorService
from auto_ease.domain.exceptions import ActorNotFoundError, DuplicateEntityError
from auto_ease.infrastructure.dependencies import get_actor_service

router = APIRouter(prefix="/actors", tags=["Actors"])


@router.post("", response_model=ActorResponse, status_code=status.HTTP_201_CREATED)
async def register_actor(
    data: ActorCreate,
    service: ActorService = Depends(get_actor_service),
) -> ActorResponse:
    """Register a client or provider."""
    try:
        actor = await service.register_actor(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return ActorResponse.model_validate(actor, from_attributes=True)


@router.get("/{actor_id}", response_model=ActorResponse)
async def get_actor(
    actor_id: str,
    service: ActorService = Depends(get_actor_service),
) -> ActorResponse:
    """Retrieve a single actor by ID."""
    try:
        actor = await service.get_actor(actor_id)
    except ActorNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ActorResponse.model_validate(actor, from_attributes=True)
