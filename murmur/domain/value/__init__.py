"""Domain value objects for the comment widget."""

from murmur.domain.value.identifiers import CommentId, SiteId
from murmur.domain.value.types import EmailHash, normalize_email

__all__ = [
    # Identifiers
    "CommentId",
    "SiteId",
    # Types
    "EmailHash",
    "normalize_email",
]
