"""Domain errors shared by the storage and API layers."""


class SkillExchangeError(Exception):
    """Base class for all service errors."""


class ConfigurationError(SkillExchangeError):
    """Service is misconfigured and must not start."""


class StorageError(SkillExchangeError):
    """Backing store is unreachable or rejected the operation."""


class MissingReferenceError(StorageError):
    """A connection references a skill that does not exist."""

    def __init__(self, from_skill_id: int, to_skill_id: int) -> None:
        self.from_skill_id = from_skill_id
        self.to_skill_id = to_skill_id
        super().__init__(
            f"Connection {from_skill_id} -> {to_skill_id} references a missing skill"
        )


class NotFoundError(SkillExchangeError):
    """Requested record does not exist."""

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


class InvalidTransitionError(SkillExchangeError):
    """Connection status change is not allowed from its current state."""

    def __init__(self, current: str, requested: str) -> None:
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot change connection status from {current} to {requested}")
