"""Typed identifiers for comment widget entities."""

from typing import NewType

# Assigned by the store, monotonically increasing
CommentId = NewType("CommentId", int)

# Opaque tenant identifier; partitions every query and cache token
SiteId = NewType("SiteId", str)
