"""SQLAlchemy table definitions for the forum.

They match the schema defined in Alembic migrations. Timestamps are unix
seconds stored as integers; states are the small integers of the domain
enums.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    SmallInteger,
    String,
    Table,
    Text,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("username", String(32), nullable=False, unique=True),
    Column("nickname", String(64), nullable=False),
    Column("avatar", String(255), nullable=False, server_default=""),
    Column("group_id", SmallInteger, nullable=False, server_default="10"),
    Column("registered_at", BigInteger, nullable=False),
    Column("sign", String(255), nullable=False, server_default=""),
)

user_groups_table = Table(
    "user_groups",
    metadata,
    Column("id", SmallInteger, primary_key=True),
    Column("name", String(255), nullable=False, server_default=""),
    Column("permission", Text, nullable=False, server_default=""),  # PHP serialize()
)

access_tokens_table = Table(
    "access_tokens",
    metadata,
    Column("token", String(255), primary_key=True),
    Column("user_id", Integer, nullable=False),
    Column("expires_at", BigInteger, nullable=False),
)

Index("idx_access_tokens_user_id", access_tokens_table.c.user_id)

friends_table = Table(
    "friends",
    metadata,
    Column("owner_id", Integer, nullable=False),
    Column("friend_id", Integer, nullable=False),
    PrimaryKeyConstraint("owner_id", "friend_id"),
)

# ============================================================================
# GROUPS
# ============================================================================
groups_table = Table(
    "groups",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False, unique=True),
    Column("title", String(255), nullable=False),
    Column("description", Text, nullable=False, server_default=""),
    Column("nsfw", Boolean, nullable=False, server_default="false"),
    Column("accessible", Boolean, nullable=False, server_default="true"),
    Column("member_count", Integer, nullable=False, server_default="0"),
    Column("created_at", BigInteger, nullable=False, server_default="0"),
    Column("icon", String(255), nullable=False, server_default=""),
)

group_members_table = Table(
    "group_members",
    metadata,
    Column("group_id", Integer, nullable=False),
    Column("user_id", Integer, nullable=False),
    Column("moderator", Boolean, nullable=False, server_default="false"),
    Column("joined_at", BigInteger, nullable=False, server_default="0"),
    PrimaryKeyConstraint("group_id", "user_id"),
)

Index(
    "idx_group_members_group_joined",
    group_members_table.c.group_id,
    group_members_table.c.joined_at,
)

# ============================================================================
# TOPICS AND REPLIES
# ============================================================================
group_topics_table = Table(
    "group_topics",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("group_id", Integer, nullable=False),
    Column("creator_id", Integer, nullable=False),
    Column("title", String(80), nullable=False),
    Column("created_at", BigInteger, nullable=False),
    Column("updated_at", BigInteger, nullable=False),
    Column("dateline", BigInteger, nullable=False),  # ordering score
    Column("replies", Integer, nullable=False, server_default="0"),
    Column("state", SmallInteger, nullable=False, server_default="0"),
    Column("display", SmallInteger, nullable=False, server_default="1"),
)

Index(
    "idx_group_topics_listing",
    group_topics_table.c.group_id,
    group_topics_table.c.display,
    group_topics_table.c.dateline,
)

group_posts_table = Table(
    "group_posts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("topic_id", Integer, nullable=False),
    Column("creator_id", Integer, nullable=False),
    Column("related", Integer, nullable=False, server_default="0"),  # 0 = top-level
    Column("content", Text, nullable=False),
    Column("state", SmallInteger, nullable=False, server_default="0"),
    Column("created_at", BigInteger, nullable=False),
)

Index("idx_group_posts_topic_id", group_posts_table.c.topic_id)

# ============================================================================
# SUBJECTS
# ============================================================================
subjects_table = Table(
    "subjects",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("nsfw", Boolean, nullable=False, server_default="false"),
)

# ============================================================================
# NOTIFICATIONS
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("dest_user_id", Integer, nullable=False),
    Column("source_user_id", Integer, nullable=False),
    Column("type", SmallInteger, nullable=False),
    Column("post_id", Integer, nullable=False),
    Column("topic_id", Integer, nullable=False),
    Column("title", String(255), nullable=False),
    Column("created_at", BigInteger, nullable=False),
    Column("unread", Boolean, nullable=False, server_default="true"),
)

Index("idx_notifications_dest_user_id", notifications_table.c.dest_user_id)
