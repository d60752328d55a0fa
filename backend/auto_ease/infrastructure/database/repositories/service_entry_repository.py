"""Concrete repository implementation for ServiceEntry backed by SQLAlchemy."""

import logging
from datetime import datetime, timezone

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from auto_ease.application.interfaces import ServiceEntryRepository
from auto_ease.domain.entities import ServiceEntry
from auto_ease.infrastructure.database.models import ServiceEntryModel
from auto_ease.infrastructure.database.utc import as_utc

logger = logging.getLogger(__name__)

# Columns copied between entity and model; id and timestamps are store-owned
_MUTABLE_FIELDS = (
    "client_ref",
    "provider_ref",
    "entry_kind",
    "car_make",
    "car_model",
    "car_year",
    "car_vin",
    "description",
    "service_date",
    "location",
    "priority",
    "cost",
    "note",
)


class SQLAlchemyServiceEntryRepository(ServiceEntryRepository):
    """Implements the ServiceEntryRepository port using SQLAlchemy async sessions.

    Every operation runs in its own short transaction, so the repository can
    be shared by all requests for the lifetime of the application.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    def _to_entity(self, model: ServiceEntryModel) -> ServiceEntry:
        """Map ORM model → domain entity."""
        return ServiceEntry(
            id=model.id,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
            **{name: getattr(model, name) for name in _MUTABLE_FIELDS},
        )

    def _to_model(self, entity: ServiceEntry) -> ServiceEntryModel:
        """Map domain entity → ORM model (for creation; the table assigns id and timestamps)."""
        return ServiceEntryModel(
            **{name: getattr(entity, name) for name in _MUTABLE_FIELDS}
        )

    async def get_by_id(self, entry_id: int) -> ServiceEntry | None:
        async with self._session_factory() as session:
            model = await session.get(ServiceEntryModel, entry_id)
            return self._to_entity(model) if model else None

    async def save(self, entry: ServiceEntry) -> ServiceEntry:
        async with self._session_factory() as session, session.begin():
            if entry.id is None:
                model = self._to_model(entry)
                session.add(model)
            else:
                model = await session.get(ServiceEntryModel, entry.id)
                if model is None:
                    raise ValueError(f"ServiceEntry {entry.id} not found in database")
                for name in _MUTABLE_FIELDS:
                    setattr(model, name, getattr(entry, name))
                model.updated_at = datetime.now(timezone.utc)
            await session.flush()
            return self._to_entity(model)

    async def claim(self, entry_id: int, provider_ref: str) -> ServiceEntry | None:
        async with self._session_factory() as session, session.begin():
            stmt = (
                update(ServiceEntryModel)
                .where(
                    ServiceEntryModel.id == entry_id,
                    ServiceEntryModel.provider_ref.is_(None),
                )
                .values(provider_ref=provider_ref, updated_at=datetime.now(timezone.utc))
                .execution_options(synchronize_session=False)
            )
            result = await session.execute(stmt)
            if result.rowcount != 1:
                logger.debug("Claim of entry %s matched no unclaimed row", entry_id)
                return None

            model = await session.get(ServiceEntryModel, entry_id)
            return self._to_entity(model)

    async def list_entries(
        self,
        *,
        client_ref: str | None = None,
        provider_ref: str | None = None,
        claimed: bool | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[ServiceEntry]:
        stmt = select(ServiceEntryModel)

        if client_ref is not None:
            stmt = stmt.where(ServiceEntryModel.client_ref == client_ref)
        if provider_ref is not None:
            stmt = stmt.where(ServiceEntryModel.provider_ref == provider_ref)
        if claimed is True:
            stmt = stmt.where(ServiceEntryModel.provider_ref.is_not(None))
        elif claimed is False:
            stmt = stmt.where(ServiceEntryModel.provider_ref.is_(None))

        stmt = stmt.order_by(
            ServiceEntryModel.priority.desc(), ServiceEntryModel.id.asc()
        ).offset(skip).limit(limit)

        async with self._session_factory() as session:
            result = await session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]
