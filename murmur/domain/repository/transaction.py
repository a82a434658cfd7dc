"""Transaction boundary interface."""

from abc import ABC, abstractmethod


class TransactionManager(ABC):
    """Makes pending store mutations durable.

    Use cases commit before scheduling work that must observe the
    mutation (freshness invalidation, notifications).
    """

    @abstractmethod
    async def commit(self) -> None:
        """Commit pending changes."""
        pass
