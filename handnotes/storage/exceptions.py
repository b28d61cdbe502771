class StorageError(Exception):
    """Raised when the object store rejects an operation."""


class ObjectAlreadyExistsError(StorageError):
    """Raised when an upload targets a key that is already taken."""
