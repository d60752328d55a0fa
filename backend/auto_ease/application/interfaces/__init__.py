from .actor_directory import ActorDirectory
from .service_entry_repository import ServiceEntryRepository

__all__ = [
    "ActorDirectory",
    "ServiceEntryRepository",
]
