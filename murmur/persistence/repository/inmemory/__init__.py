"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .kv import InMemoryKeyValueStore
from .transaction import InMemoryTransactionManager

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryKeyValueStore",
    "InMemoryTransactionManager",
]
