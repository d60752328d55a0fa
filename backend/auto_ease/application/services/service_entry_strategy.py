"""Common processing contract for role-specific service entry strategies."""

from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel

from auto_ease.domain.entities import ActorRole, ServiceEntry

RequestT = TypeVar("RequestT", bound=BaseModel)


class ServiceEntryStrategy(ABC, Generic[RequestT]):
    """Handles one actor role's service entry requests.

    Subclasses declare the role they serve and the request shape they accept,
    so the dispatcher can check the role/payload pairing before forwarding.
    """

    role: ClassVar[ActorRole]
    request_type: ClassVar[type[BaseModel]]

    @abstractmethod
    async def process(self, request: RequestT | None) -> ServiceEntry:
        """Process a role-specific request and return the resulting entry."""
        ...
