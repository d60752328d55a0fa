from .actor_repository import SQLAlchemyActorDirectory
from .service_entry_repository import SQLAlchemyServiceEntryRepository

__all__ = [
    "SQLAlchemyActorDirectory",
    "SQLAlchemyServiceEntryRepository",
]
