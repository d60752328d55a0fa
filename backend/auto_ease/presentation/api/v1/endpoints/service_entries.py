"""Service entry endpoints — processing requests from clients and providers, and reads."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from auto_ease.application.schemas.service_entry import (
    ProcessServiceEntryRequest,
    ServiceEntryResponse,
)
from auto_ease.application.services import ServiceEntryDispatcher, ServiceEntryService
from auto_ease.config import get_settings
from auto_ease.domain.exceptions import (
    ActorNotFoundError,
    EntityNotFoundError,
    InvalidPayloadForRoleError,
    NoMatchingEntryError,
    UnsupportedRoleError,
)
from auto_ease.infrastructure.dependencies import (
    get_service_entry_dispatcher,
    get_service_entry_service,
)

router = APIRouter(prefix="/service-entries", tags=["Service Entries"])


@router.post("/process", response_model=ServiceEntryResponse)
async def process_service_entry(
    data: ProcessServiceEntryRequest,
    dispatcher: ServiceEntryDispatcher = Depends(get_service_entry_dispatcher),
) -> ServiceEntryResponse:
    """Create an entry (client actors) or claim one (provider actors)."""
    try:
        entry = await dispatcher.process(data.actor_id, data.payload)
    except (ActorNotFoundError, NoMatchingEntryError) as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidPayloadForRoleError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except UnsupportedRoleError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return ServiceEntryResponse.model_validate(entry, from_attributes=True)


@router.get("", response_model=list[ServiceEntryResponse])
async def list_entries(
    client_ref: str | None = Query(None, description="Filter by requesting client"),
    provider_ref: str | None = Query(None, description="Filter by servicing provider"),
    claimed: bool | None = Query(None, description="Only claimed (true) or unclaimed (false) entries"),
    skip: int = Query(0, ge=0),
    limit: int | None = Query(None, ge=1),
    service: ServiceEntryService = Depends(get_service_entry_service),
) -> list[ServiceEntryResponse]:
    """Retrieve entries ordered by priority, highest first."""
    settings = get_settings()
    page_size = min(limit or settings.default_page_size, settings.max_page_size)
    entries = await service.list_entries(
        client_ref=client_ref,
        provider_ref=provider_ref,
        claimed=claimed,
        skip=skip,
        limit=page_size,
    )
    return [
        ServiceEntryResponse.model_validate(e, from_attributes=True) for e in entries
    ]


@router.get("/{entry_id}", response_model=ServiceEntryResponse)
async def get_entry(
    entry_id: int,
    service: ServiceEntryService = Depends(get_service_entry_service),
) -> ServiceEntryResponse:
    """Retrieve a single service entry by ID."""
    try:
        entry = await service.get_entry(entry_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ServiceEntryResponse.model_validate(entry, from_attributes=True)
