"""SQLAlchemy table definitions for the alumni platform.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ACCOUNTS TABLE
# ============================================================================
accounts_table = Table(
    "accounts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(50), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password_hash", Text, nullable=False),
    Column("first_name", String(100), nullable=False),
    Column("last_name", String(100), nullable=False),
    Column("graduation_year", Integer, nullable=True),
    Column("bio", Text, nullable=True),
    Column("profile_image", Text, nullable=True),
    Column("role", String(20), nullable=False, server_default="user"),
    Column("approval_status", String(20), nullable=False, server_default="approved"),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    Column("updated_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    CheckConstraint("role IN ('user', 'admin', 'super_admin')", name="role_valid"),
    CheckConstraint(
        "approval_status IN ('pending', 'approved', 'rejected')",
        name="approval_status_valid",
    ),
)

Index("idx_accounts_role", accounts_table.c.role, accounts_table.c.approval_status)
Index("idx_accounts_created_at", accounts_table.c.created_at.desc())

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column("excerpt", String(500), nullable=False, server_default=""),
    Column(
        "author_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("category", String(100), nullable=False),
    Column("status", String(20), nullable=False, server_default="published"),
    Column(
        "tags",
        postgresql.ARRAY(String(50)),
        nullable=False,
        server_default="{}",
    ),
    Column("featured_image", Text, nullable=True),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    Column("updated_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    CheckConstraint(
        "status IN ('draft', 'published', 'archived')", name="post_status_valid"
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_status", posts_table.c.status)

# ============================================================================
# COMMENTS TABLE (flat, threaded through parent_id)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("content", Text, nullable=False),
    Column(
        "author_id",
        UUID,
        ForeignKey("accounts.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column(
        "parent_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    CheckConstraint("length(content) > 0", name="content_not_empty"),
)

Index("idx_comments_post_id", comments_table.c.post_id, comments_table.c.created_at)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# POST LIKES TABLE
# ============================================================================
post_likes_table = Table(
    "post_likes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "post_id", UUID, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("liker_key", String(255), nullable=False),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    UniqueConstraint("post_id", "liker_key", name="uq_post_like"),
)

Index("idx_post_likes_post_id", post_likes_table.c.post_id)

# ============================================================================
# EVENTS TABLE
# ============================================================================
events_table = Table(
    "events",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(200), nullable=False),
    Column("description", Text, nullable=False),
    Column("start_date", TIMESTAMP, nullable=False),
    Column("end_date", TIMESTAMP, nullable=True),
    Column("location", String(255), nullable=False),
    Column("category", String(100), nullable=False),
    Column("featured_image", Text, nullable=True),
    Column("is_virtual", Boolean, nullable=False, server_default="false"),
    Column("max_attendees", Integer, nullable=True),
    Column("registration_deadline", TIMESTAMP, nullable=True),
    Column("status", String(20), nullable=False, server_default="upcoming"),
    Column(
        "created_by",
        UUID,
        ForeignKey("accounts.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    Column("updated_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    CheckConstraint(
        "status IN ('upcoming', 'ongoing', 'completed', 'cancelled')",
        name="event_status_valid",
    ),
    CheckConstraint(
        "max_attendees IS NULL OR max_attendees > 0", name="max_attendees_positive"
    ),
)

Index("idx_events_start_date", events_table.c.start_date)

# ============================================================================
# EVENT REGISTRATIONS TABLE
# ============================================================================
event_registrations_table = Table(
    "event_registrations",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "event_id", UUID, ForeignKey("events.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "user_id", UUID, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False
    ),
    Column("registered_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    UniqueConstraint("event_id", "user_id", name="uq_event_registration"),
)

Index("idx_event_registrations_event_id", event_registrations_table.c.event_id)

# ============================================================================
# STAFF TABLE
# ============================================================================
staff_table = Table(
    "staff",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "user_id",
        UUID,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column("position", String(200), nullable=False),
    Column("department", String(200), nullable=True),
    Column("bio", Text, nullable=True),
    Column("phone_number", String(50), nullable=True),
    Column("office_location", String(200), nullable=True),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column("created_at", TIMESTAMP, nullable=False, server_default="NOW()"),
    Column("updated_at", TIMESTAMP, nullable=False, server_default="NOW()"),
)

Index("idx_staff_active_position", staff_table.c.is_active, staff_table.c.position)
