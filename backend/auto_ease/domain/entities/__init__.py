from .actor import Actor, ActorRole
from .service_entry import EntryStatus, ServiceEntry

__all__ = [
    "Actor",
    "ActorRole",
    "EntryStatus",
    "ServiceEntry",
]
