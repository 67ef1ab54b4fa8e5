"""SQLAlchemy table definitions for agora.

These table definitions match the schema defined in Alembic migrations.
Posts live in an external service and are referenced by ID only.
"""

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    ForeignKey,
    Identity,
    Index,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column("post_id", BigInteger, nullable=False),
    Column(
        "parent_id",
        BigInteger,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("content", Text, nullable=False),
    Column("author_id", String(255), nullable=False),
    Column("author_name", String(255), nullable=False),  # Denormalized from identity
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("length(content) > 0", name="ck_comments_content_not_empty"),
)

Index("idx_comments_post_id_created_at", comments_table.c.post_id, comments_table.c.created_at)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", BigInteger, Identity(), primary_key=True),
    Column("post_id", BigInteger, nullable=False),
    Column("user_id", String(255), nullable=False),
    Column("value", SmallInteger, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One live vote per user per post; the vote service relies on this
    UniqueConstraint("post_id", "user_id", name="uq_votes_post_user"),
    CheckConstraint("value IN (1, -1)", name="ck_votes_value"),
)
