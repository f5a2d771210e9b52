class StoreError(Exception):
    """Base class for everything the store raises to its callers."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(StoreError):
    """A required field is empty or invalid."""


class ConflictError(StoreError):
    """A uniqueness constraint was violated."""


class NotFoundError(StoreError):
    """The targeted row does not exist."""


class StorageError(StoreError):
    """The underlying database failed. Never retried by the store."""
