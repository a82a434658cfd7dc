"""SQLAlchemy transaction boundary."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from murmur.domain.repository import TransactionManager


class SqlAlchemyTransactionManager(TransactionManager):
    """Commits the request's database session."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize with the request session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def commit(self) -> None:
        """Commit the session."""
        await self.session.commit()
        logfire.info("Session committed")
