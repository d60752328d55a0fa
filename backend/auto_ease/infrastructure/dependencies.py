"""Composition root and FastAPI dependency injection.

The store, actor directory, strategy registry and services are built once by
``build_app_services`` during startup and kept on ``app.state``; the
dependency functions below only hand those shared instances to endpoints.
"""

from dataclasses import dataclass

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from auto_ease.application.services import (
    ActorService,
    ServiceEntryDispatcher,
    ServiceEntryService,
    build_strategy_registry,
)
from auto_ease.infrastructure.database.repositories import (
    SQLAlchemyActorDirectory,
    SQLAlchemyServiceEntryRepository,
)


@dataclass(frozen=True)
class AppServices:
    """Application-wide service instances, wired once at startup."""

    dispatcher: ServiceEntryDispatcher
    service_entries: ServiceEntryService
    actors: ActorService


def build_app_services(session_factory: async_sessionmaker[AsyncSession]) -> AppServices:
    """Wire repositories, the strategy registry and the services together."""
    entry_repository = SQLAlchemyServiceEntryRepository(session_factory)
    actor_directory = SQLAlchemyActorDirectory(session_factory)

    return AppServices(
        dispatcher=ServiceEntryDispatcher(
            actor_directory=actor_directory,
            strategies=build_strategy_registry(entry_repository),
        ),
        service_entries=ServiceEntryService(entry_repository),
        actors=ActorService(actor_directory),
    )


def get_app_services(request: Request) -> AppServices:
    """FastAPI dependency — the services built in the application lifespan."""
    return request.app.state.services


def get_service_entry_dispatcher(
    services: AppServices = Depends(get_app_services),
) -> ServiceEntryDispatcher:
    return services.dispatcher


def get_service_entry_service(
    services: AppServices = Depends(get_app_services),
) -> ServiceEntryService:
    return services.service_entries


def get_actor_service(
    services: AppServices = Depends(get_app_services),
) -> ActorService:
    return services.actors
