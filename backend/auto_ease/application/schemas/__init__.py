from .actor import ActorCreate, ActorResponse
from .service_entry import (
    ClientCreationRequest,
    ProcessServiceEntryRequest,
    ProviderLookupRequest,
    RoleRequest,
    ServiceEntryResponse,
)

__all__ = [
    "ActorCreate",
    "ActorResponse",
    "ClientCreationRequest",
    "ProcessServiceEntryRequest",
    "ProviderLookupRequest",
    "RoleRequest",
    "ServiceEntryResponse",
]
