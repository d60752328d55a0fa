"""Provider-role strategy — looks up an unclaimed service entry and claims it."""

import logging

from auto_ease.application.interfaces import ServiceEntryRepository
from auto_ease.application.schemas.service_entry import ProviderLookupRequest
from auto_ease.application.services.service_entry_strategy import ServiceEntryStrategy
from auto_ease.domain.entities import ActorRole, ServiceEntry
from auto_ease.domain.exceptions import NoMatchingEntryError

logger = logging.getLogger(__name__)


class ProviderLookupStrategy(ServiceEntryStrategy[ProviderLookupRequest]):
    """Claims an existing entry for a service provider.

    An entry is claimable when it has no provider yet and the request names
    a provider. The provider is not matched against any scoping on the entry
    itself; every failure is reported as NoMatchingEntryError.
    """

    role = ActorRole.PROVIDER
    request_type = ProviderLookupRequest

    def __init__(self, repository: ServiceEntryRepository):
        self._repository = repository

    async def process(self, request: ProviderLookupRequest | None) -> ServiceEntry:
        if request is None:
            raise NoMatchingEntryError(None, None)

        entry = None
        if request.entry_id is not None:
            entry = await self._repository.get_by_id(request.entry_id)

        if entry is None or request.provider_ref is None or entry.is_claimed:
            logger.info(
                "No claimable entry %s for provider %s",
                request.entry_id,
                request.provider_ref,
            )
            raise NoMatchingEntryError(request.entry_id, request.provider_ref)

        # Compare-and-set in the store; a concurrent claim makes this return None
        claimed = await self._repository.claim(entry.id, request.provider_ref)
        if claimed is None:
            logger.warning(
                "Entry %s was claimed concurrently before provider %s",
                entry.id,
                request.provider_ref,
            )
            raise NoMatchingEntryError(request.entry_id, request.provider_ref)

        logger.info("Provider %s claimed service entry %s", claimed.provider_ref, claimed.id)
        return claimed
