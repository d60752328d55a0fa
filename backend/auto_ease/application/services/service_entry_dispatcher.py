"""Service entry dispatcher — routes a request to the strategy for the actor's role.

Flow:
    1. Resolve the actor through the ActorDirectory (ActorNotFoundError)
    2. Select the strategy registered for the actor's role (UnsupportedRoleError)
    3. Check the payload shape against the strategy's request type,
       marshaling raw mappings into it (InvalidPayloadForRoleError)
    4. Forward to the strategy and return its entry unchanged
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ValidationError

from auto_ease.application.interfaces import ActorDirectory, ServiceEntryRepository
from auto_ease.application.schemas.service_entry import (
    ClientCreationRequest,
    ProviderLookupRequest,
    RoleRequest,
)
from auto_ease.application.services.client_creation_strategy import ClientCreationStrategy
from auto_ease.application.services.provider_lookup_strategy import ProviderLookupStrategy
from auto_ease.application.services.service_entry_strategy import ServiceEntryStrategy
from auto_ease.domain.entities import ActorRole, ServiceEntry
from auto_ease.domain.exceptions import (
    ActorNotFoundError,
    InvalidPayloadForRoleError,
    UnsupportedRoleError,
)
from auto_ease.infrastructure.logging.colored_logger import DispatchLogger, DispatchStage

dlog = DispatchLogger("ServiceEntryDispatcher")

StrategyRegistry = Mapping[ActorRole, ServiceEntryStrategy]


def build_strategy_registry(repository: ServiceEntryRepository) -> StrategyRegistry:
    """Build the read-only role → strategy mapping. Call once at startup."""
    strategies: list[ServiceEntryStrategy] = [
        ClientCreationStrategy(repository),
        ProviderLookupStrategy(repository),
    ]
    return MappingProxyType({strategy.role: strategy for strategy in strategies})


class ServiceEntryDispatcher:
    """Single entry point for service entry requests from any actor."""

    def __init__(self, actor_directory: ActorDirectory, strategies: StrategyRegistry):
        self._actor_directory = actor_directory
        self._strategies = MappingProxyType(dict(strategies))

    async def process(
        self,
        actor_id: str,
        payload: RoleRequest | Mapping[str, Any] | None,
    ) -> ServiceEntry:
        """Process a request for ``actor_id``; raw mappings are marshaled per role."""
        with dlog.timed_step(DispatchStage.RESOLVE, f"Resolving actor {actor_id}"):
            actor = await self._actor_directory.find_actor(actor_id)
            if actor is None:
                raise ActorNotFoundError(actor_id)

        with dlog.timed_step(DispatchStage.DISPATCH, f"Selecting strategy for {actor.role.value}"):
            strategy = self._strategies.get(actor.role)
            if strategy is None:
                raise UnsupportedRoleError(actor.role.value)
            request = self._validate_payload(actor.role, strategy, payload)

        stage = DispatchStage.CREATE if actor.role is ActorRole.CLIENT else DispatchStage.CLAIM
        with dlog.timed_step(stage, f"Running {type(strategy).__name__}", actor=actor_id):
            return await strategy.process(request)

    async def create_entry_for_client(
        self, request: ClientCreationRequest | None
    ) -> ServiceEntry:
        """Run the client strategy directly, for callers that already know the role."""
        return await self._strategy_for(ActorRole.CLIENT).process(request)

    async def claim_entry_for_provider(
        self, request: ProviderLookupRequest | None
    ) -> ServiceEntry:
        """Run the provider strategy directly, for callers that already know the role."""
        return await self._strategy_for(ActorRole.PROVIDER).process(request)

    # ── Internal helpers ──────────────────────────────────────────────

    def _strategy_for(self, role: ActorRole) -> ServiceEntryStrategy:
        strategy = self._strategies.get(role)
        if strategy is None:
            raise UnsupportedRoleError(role.value)
        return strategy

    @staticmethod
    def _validate_payload(
        role: ActorRole,
        strategy: ServiceEntryStrategy,
        payload: RoleRequest | Mapping[str, Any] | None,
    ) -> BaseModel | None:
        """Return the payload as the strategy's request type or raise.

        Typed requests must already be of the expected type. Mappings are
        validated against it; unknown fields are rejected, so the other
        role's shape never validates.
        """
        expected = strategy.request_type
        if payload is None or isinstance(payload, expected):
            return payload

        if isinstance(payload, BaseModel):
            raise InvalidPayloadForRoleError(
                role.value, expected.__name__, f"got {type(payload).__name__}",
            )

        if isinstance(payload, Mapping):
            try:
                request = expected.model_validate(dict(payload))
            except ValidationError as exc:
                raise InvalidPayloadForRoleError(
                    role.value,
                    expected.__name__,
                    f"{exc.error_count()} validation error(s)",
                ) from exc
            dlog.detail("Marshaled raw payload", request_type=expected.__name__)
            return request

        raise InvalidPayloadForRoleError(
            role.value, expected.__name__, f"unsupported payload type {type(payload).__name__}",
        )
