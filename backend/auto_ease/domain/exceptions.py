"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(Exception):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class ActorNotFoundError(EntityNotFoundError):
    """Raised when an actor identifier does not resolve in the actor directory."""

    def __init__(self, actor_id: str):
        super().__init__("Actor", actor_id)
        self.actor_id = actor_id


class UnsupportedRoleError(Exception):
    """Raised when no strategy is registered for a resolved actor role.

    Indicates a wiring defect rather than bad client input.
    """

    def __init__(self, role: str):
        self.role = role
        super().__init__(f"No service entry strategy registered for role '{role}'")


class InvalidPayloadForRoleError(Exception):
    """Raised when a payload's shape does not match the one expected for the actor role."""

    def __init__(self, role: str, expected: str, reason: str):
        self.role = role
        self.expected = expected
        self.reason = reason
        super().__init__(
            f"Payload is not a valid {expected} for role '{role}': {reason}"
        )


class NoMatchingEntryError(Exception):
    """Raised when a provider lookup finds no claimable service entry."""

    def __init__(self, entry_id: int | None, provider_ref: str | None):
        self.entry_id = entry_id
        self.provider_ref = provider_ref
        super().__init__(
            f"No claimable service entry with id '{entry_id}' "
            f"for provider '{provider_ref}'"
        )
