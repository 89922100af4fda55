"""Domain-specific exceptions — framework-independent."""


class ValidationError(Exception):
    """Raised when an entity field is empty or exceeds its length bound.

    Always raised before any store interaction, so persisted state is never
    touched by an invalid value.
    """

    def __init__(self, entity_type: str, field: str, message: str):
        self.entity_type = entity_type
        self.field = field
        self.message = message
        super().__init__(f"{entity_type}.{field}: {message}")


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class ConstraintViolationError(Exception):
    """Raised when a required relationship is missing or the store rejects a write.

    Store-level integrity errors are chained as ``__cause__``.
    """

    def __init__(self, entity_type: str, message: str):
        self.entity_type = entity_type
        self.message = message
        super().__init__(f"{entity_type}: {message}")
