"""SQLAlchemy table definitions for the comment store.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# parent_id has no foreign key: deleting a comment leaves its replies in
# place, unreachable from the listing.
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("site_id", String(255), nullable=False),
    Column("parent_id", Integer, nullable=True),
    Column("content", Text, nullable=False),
    Column("author_name", String(255), nullable=False),
    Column("email", String(320), nullable=True),  # Raw email, never served
    Column("email_md5", String(32), nullable=False),
    Column("avatar_id", String(32), nullable=False),
    Column("ip_address", String(64), nullable=False, server_default=""),
    Column("user_agent", Text, nullable=False, server_default=""),
    Column("context_url", Text, nullable=True),
    Column("created_at", BigInteger, nullable=False),  # Epoch milliseconds
    Column("is_admin", Boolean, nullable=False, server_default="false"),
)

Index(
    "idx_comments_site_root",
    comments_table.c.site_id,
    comments_table.c.parent_id,
    comments_table.c.created_at,
)
Index("idx_comments_parent_id", comments_table.c.parent_id, comments_table.c.id)
Index("idx_comments_email_md5", comments_table.c.email_md5)
Index("idx_comments_created_at", comments_table.c.created_at)
