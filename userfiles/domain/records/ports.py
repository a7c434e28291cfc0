"""
Port interfaces (ABCs) for the records bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
"""

from abc import ABC, abstractmethod


class RecordStore(ABC):
    """Port for durable storage of per-user records."""

    @abstractmethod
    def put(self, user_id: str, content: bytes) -> None:
        """Store content for a user, replacing any previous content.

        Raises:
            MissingUserIdError: If ``user_id`` is empty.
            RecordWriteError: If the content cannot be persisted.
        """
        raise NotImplementedError

    @abstractmethod
    def exists(self, user_id: str) -> bool:
        """Return whether a record is stored for the user. Never raises."""
        raise NotImplementedError

    @abstractmethod
    def list_ids(self) -> list[str]:
        """Return the filenames of all stored records.

        Order is whatever the backing storage yields and must not be
        relied upon.

        Raises:
            RecordListingError: If the storage cannot be enumerated.
        """
        raise NotImplementedError
