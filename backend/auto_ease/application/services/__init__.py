from .actor_service import ActorService
from .client_creation_strategy import ClientCreationStrategy
from .provider_lookup_strategy import ProviderLookupStrategy
from .service_entry_dispatcher import ServiceEntryDispatcher, build_strategy_registry
from .service_entry_service import ServiceEntryService
from .service_entry_strategy import ServiceEntryStrategy

__all__ = [
    "ActorService",
    "ClientCreationStrategy",
    "ProviderLookupStrategy",
    "ServiceEntryDispatcher",
    "ServiceEntryService",
    "ServiceEntryStrategy",
    "build_strategy_registry",
]
