"""SQLAlchemy ORM model for the ServiceEntry entity."""

from datetime import date, datetime, timezone
from decimal import Decimal

from sqlalchemy import Date, DateTime, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from auto_ease.infrastructure.database.base import Base


class ServiceEntryModel(Base):
    """ORM model — maps to the 'service_entries' table."""

    __tablename__ = "service_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    client_ref: Mapped[str | None] = mapped_column(String(50), nullable=True)
    provider_ref: Mapped[str | None] = mapped_column(String(50), nullable=True)
    entry_kind: Mapped[str | None] = mapped_column(String(100), nullable=True)
    car_make: Mapped[str | None] = mapped_column(String(100), nullable=True)
    car_model: Mapped[str | None] = mapped_column(String(100), nullable=True)
    car_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    car_vin: Mapped[str | None] = mapped_column(String(17), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    service_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    priority: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    cost: Mapped[Decimal | None] = mapped_column(Numeric(12, 2), nullable=True)
    note: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_service_entries_client", "client_ref"),
        Index("ix_service_entries_provider", "provider_ref"),
        Index("ix_service_entries_priority", "priority"),
    )

    def __repr__(self) -> str:
        return (
            f"<ServiceEntryModel(id={self.id}, "
            f"client='{self.client_ref}', provider='{self.provider_ref}')>"
        )
