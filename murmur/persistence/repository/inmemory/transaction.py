"""In-memory transaction manager for testing."""

from murmur.domain.repository.transaction import TransactionManager


class InMemoryTransactionManager(TransactionManager):
    """Counts commits; in-memory stores apply changes immediately."""

    def __init__(self) -> None:
        self.commits = 0

    async def commit(self) -> None:
        """Record a commit."""
        self.commits += 1
