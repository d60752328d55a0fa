"""Abstract repository interface (port) for ServiceEntry persistence."""

from abc import ABC, abstractmethod

from auto_ease.domain.entities import ServiceEntry


class ServiceEntryRepository(ABC):
    """Port for the entry store — implemented in the infrastructure layer.

    Each operation is atomic on a single record.
    """

    @abstractmethod
    async def get_by_id(self, entry_id: int) -> ServiceEntry | None:
        """Retrieve a single entry by its ID."""
        ...

    @abstractmethod
    async def save(self, entry: ServiceEntry) -> ServiceEntry:
        """Insert or update an entry and return the stored copy.

        An entry without an ID is inserted: the store assigns the ID and both
        timestamps. An entry with an ID is updated: only updated_at changes.
        """
        ...

    @abstractmethod
    async def claim(self, entry_id: int, provider_ref: str) -> ServiceEntry | None:
        """Assign a provider to an entry only if it has no provider yet.

        Returns the claimed entry, or None when the entry is missing or was
        already claimed.
        """
        ...

    @abstractmethod
    async def list_entries(
        self,
        *,
        client_ref: str | None = None,
        provider_ref: str | None = None,
        claimed: bool | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[ServiceEntry]:
        """Retrieve a filtered, paginated list ordered by priority (highest first)."""
        ...
