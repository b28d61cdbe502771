from abc import ABC, abstractmethod


class BaseObjectStore(ABC):
    """Contract for all object store adapters."""

    @abstractmethod
    def upload(self, key: str, data: bytes, content_type: str) -> None:
        """Store data under key without overwriting.

        Raises:
            ObjectAlreadyExistsError: if an object already exists at key.
            StorageError: on any other storage failure.
        """

    @abstractmethod
    def public_url(self, key: str) -> str | None:
        """Return a publicly resolvable URL for key, or None if none can be built."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove the object at key. Deleting a missing key is not an error.

        Raises:
            StorageError: if the store rejects the deletion.
        """
