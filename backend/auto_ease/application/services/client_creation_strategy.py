"""Client-role strategy — turns a client request into a new stored service entry."""

import logging

from auto_ease.application.interfaces import ServiceEntryRepository
from auto_ease.application.schemas.service_entry import ClientCreationRequest
from auto_ease.application.services.service_entry_strategy import ServiceEntryStrategy
from auto_ease.domain.entities import ActorRole, ServiceEntry

logger = logging.getLogger(__name__)


class ClientCreationStrategy(ServiceEntryStrategy[ClientCreationRequest]):
    """Creates service entries on behalf of clients.

    A missing request is not an error here: it produces a blank entry.
    Callers that need stricter validation must enforce it before calling.
    """

    role = ActorRole.CLIENT
    request_type = ClientCreationRequest

    def __init__(self, repository: ServiceEntryRepository):
        self._repository = repository

    async def process(self, request: ClientCreationRequest | None) -> ServiceEntry:
        entry = ServiceEntry()

        if request is not None:
            entry.client_ref = request.client_ref
            entry.entry_kind = request.entry_kind
            entry.car_make = request.car_make
            entry.car_model = request.car_model
            entry.car_vin = request.car_vin
            entry.description = request.description
            entry.service_date = request.service_date
            entry.location = request.location
            entry.cost = request.cost
            entry.note = request.note
            # Numeric fields keep their defaults when absent
            if request.car_year is not None:
                entry.car_year = request.car_year
            if request.priority is not None:
                entry.priority = request.priority

        stored = await self._repository.save(entry)
        logger.info(
            "Created service entry %s for client %s (kind=%s, priority=%d)",
            stored.id,
            stored.client_ref,
            stored.entry_kind,
            stored.priority,
        )
        return stored
