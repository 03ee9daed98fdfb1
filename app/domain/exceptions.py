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


class PersistenceError(Exception):
    """Raised when the storage layer fails to write an entity.

    Storage-agnostic — repositories wrap their driver errors in it so the
    application layer never imports the ORM.
    """

    def __init__(self, entity_type: str, operation: str, reason: str = ""):
        self.entity_type = entity_type
        self.operation = operation
        self.reason = reason
        message = f"Failed to {operation} {entity_type}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
