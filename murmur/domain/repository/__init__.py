"""Repository interfaces for the comment widget domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from murmur.domain.repository.comment import CommentRepository
from murmur.domain.repository.kv import KeyValueStore
from murmur.domain.repository.transaction import TransactionManager

__all__ = [
    "CommentRepository",
    "KeyValueStore",
    "TransactionManager",
]
