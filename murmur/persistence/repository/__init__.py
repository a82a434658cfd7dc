"""Store implementations backed by PostgreSQL and Redis."""

from murmur.persistence.repository.comment import PostgresCommentRepository
from murmur.persistence.repository.kv import RedisKeyValueStore, create_redis_client
from murmur.persistence.repository.transaction import SqlAlchemyTransactionManager

__all__ = [
    "PostgresCommentRepository",
    "RedisKeyValueStore",
    "SqlAlchemyTransactionManager",
    "create_redis_client",
]
