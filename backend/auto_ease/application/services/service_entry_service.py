"""Application service (use case) for reading service entries."""

from auto_ease.application.interfaces import ServiceEntryRepository
from auto_ease.domain.entities import ServiceEntry
from auto_ease.domain.exceptions import EntityNotFoundError


class ServiceEntryService:
    """Read-side service entry queries. Depends on the repository port (DI)."""

    def __init__(self, repository: ServiceEntryRepository):
        self._repository = repository

    async def get_entry(self, entry_id: int) -> ServiceEntry:
        entry = await self._repository.get_by_id(entry_id)
        if entry is None:
            raise EntityNotFoundError("ServiceEntry", entry_id)
        return entry

    async def list_entries(
        self,
        *,
        client_ref: str | None = None,
        provider_ref: str | None = None,
        claimed: bool | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[ServiceEntry]:
        return await self._repository.list_entries(
            client_ref=client_ref,
            provider_ref=provider_ref,
            claimed=claimed,
            skip=skip,
            limit=limit,
        )
