from .actor import ActorModel
from .service_entry import ServiceEntryModel

__all__ = [
    "ActorModel",
    "ServiceEntryModel",
]
