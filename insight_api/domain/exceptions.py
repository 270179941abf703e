"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class InvalidArgumentError(Exception):
    """Raised when a caller supplies an argument the service cannot accept."""


class InvalidIdentifierError(InvalidArgumentError):
    """Raised when one or more identifiers are not well-formed."""

    def __init__(self, entity_type: str, entity_ids: list[str]):
        self.entity_type = entity_type
        self.entity_ids = entity_ids
        joined = ", ".join(f"'{i}'" for i in entity_ids)
        super().__init__(f"Invalid {entity_type} id: {joined}")


class RepositoryError(Exception):
    """Raised when the backing store is unreachable or an operation fails.

    Never retried; surfaces to the caller as an internal error.
    """

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Store operation '{operation}' failed")
