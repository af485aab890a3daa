"""SQLAlchemy table definitions for Huddle.

Membership collections are PostgreSQL arrays so that add-to-set and pull
are single-statement updates. Options are free-form JSONB records.
"""

from sqlalchemy import Column, Index, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ACTIVITIES TABLE
# ============================================================================
activities_table = Table(
    "activities",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(200), nullable=False, unique=True),
    Column("join_code", String(200), nullable=False),
    Column("creator", UUID, nullable=False),
    Column("managers", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("members", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("carpools", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("options", JSONB, nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_activities_creator", activities_table.c.creator)
Index(
    "idx_activities_members", activities_table.c.members, postgresql_using="gin"
)
Index(
    "idx_activities_managers", activities_table.c.managers, postgresql_using="gin"
)
Index("idx_activities_updated_at", activities_table.c.updated_at.desc())

# ============================================================================
# CARPOOLS TABLE
# ============================================================================
carpools_table = Table(
    "carpools",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("name", String(200), nullable=False, unique=True),
    Column("target", UUID, nullable=False),  # Weak reference, no foreign key
    Column("driver", UUID, nullable=False),
    Column("members", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("options", JSONB, nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_carpools_target", carpools_table.c.target)
Index("idx_carpools_driver", carpools_table.c.driver)
Index("idx_carpools_members", carpools_table.c.members, postgresql_using="gin")

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("author", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column("options", JSONB, nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_posts_author", posts_table.c.author)
Index("idx_posts_updated_at", posts_table.c.updated_at.desc())

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# target and root are both weak references: target may be a post or a
# comment, root is always the thread's post.
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("author", UUID, nullable=False),
    Column("content", Text, nullable=False),
    Column("target", UUID, nullable=False),
    Column("root", UUID, nullable=False),
    Column("options", JSONB, nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_target", comments_table.c.target)
Index("idx_comments_root", comments_table.c.root)
Index("idx_comments_author", comments_table.c.author)
