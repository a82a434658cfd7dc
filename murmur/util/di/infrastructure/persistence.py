"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
import redis.asyncio as redis
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from murmur.config import Settings
from murmur.domain.repository import (
    CommentRepository,
    KeyValueStore,
    TransactionManager,
)
from murmur.persistence.database import create_engine, create_session_factory
from murmur.persistence.repository import (
    PostgresCommentRepository,
    RedisKeyValueStore,
    SqlAlchemyTransactionManager,
    create_redis_client,
)
from murmur.util.di.base import ProviderBase
from murmur.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base (comment store and key-value store)."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL and Redis."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed on container shutdown."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Use cases commit explicitly before scheduling follow-up work; anything
        left pending is committed at the end of the request if no exception
        occurred, or rolled back if one was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, session: AsyncSession) -> TransactionManager:
        """Provide transaction manager bound to the request session."""
        return SqlAlchemyTransactionManager(session)

    @provide(scope=Scope.APP)
    async def get_redis_client(self, settings: Settings) -> AsyncIterator[redis.Redis]:
        """Provide Redis client, closed on container shutdown."""
        client = create_redis_client(settings.kv)
        yield client
        await client.aclose()

    @provide(scope=Scope.APP)
    def get_kv_store(self, client: redis.Redis) -> KeyValueStore:
        """Provide key-value store."""
        return RedisKeyValueStore(client)

