"""Unit of work interface."""

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Commit boundary for the writes issued during one request.

    Use cases that mutate state commit through this before invalidating any
    cached view, so a read that repopulates the cache sees the new rows.
    """

    @abstractmethod
    async def commit(self) -> None:
        """Make the writes issued so far durable and visible to other readers.

        Raises:
            StoreError: If the store fails to commit
        """
        pass
