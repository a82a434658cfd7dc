"""create_comments

Create the comment store: one flat table partitioned by site, with
parent_id linking replies to their parent.

Revision ID: 3f2c8d1a9b40
Revises:
Create Date: 2026-10-18 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2c8d1a9b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), sa.Identity(always=False), nullable=False),
        sa.Column("site_id", sa.String(255), nullable=False),
        sa.Column("parent_id", sa.Integer(), nullable=True),  # No FK: replies outlive parents
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("email_md5", sa.String(32), nullable=False),
        sa.Column("avatar_id", sa.String(32), nullable=False),
        sa.Column("ip_address", sa.String(64), nullable=False, server_default=""),
        sa.Column("user_agent", sa.Text(), nullable=False, server_default=""),
        sa.Column("context_url", sa.Text(), nullable=True),
        sa.Column("created_at", sa.BigInteger(), nullable=False),  # Epoch ms
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default="false"),
        sa.PrimaryKeyConstraint("id"),
    )

    # Root page: site + roots + newest first
    op.create_index(
        "idx_comments_site_root",
        "comments",
        ["site_id", "parent_id", "created_at"],
    )
    # Reply pages and counts: parent + id cursor
    op.create_index("idx_comments_parent_id", "comments", ["parent_id", "id"])
    op.create_index("idx_comments_email_md5", "comments", ["email_md5"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_comments_created_at", table_name="comments")
    op.drop_index("idx_comments_email_md5", table_name="comments")
    op.drop_index("idx_comments_parent_id", table_name="comments")
    op.drop_index("idx_comments_site_root", table_name="comments")
    op.drop_table("comments")
