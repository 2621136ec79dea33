"""initial_schema

Create the forum schema:
- Users, user groups (roles with permission bags), access tokens, friends
- Groups and group members
- Group topics and group posts (replies; the first post is the topic body)
- Subjects (topic scope lookup)
- Notifications

Timestamps are unix seconds stored as BIGINT.

Revision ID: 3f6b2c1d9e07
Revises:
Create Date: 2026-10-18 10:12:44.581203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f6b2c1d9e07"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(32), nullable=False),
        sa.Column("nickname", sa.String(64), nullable=False),
        sa.Column("avatar", sa.String(255), nullable=False, server_default=""),
        sa.Column("group_id", sa.SmallInteger(), nullable=False, server_default="10"),
        sa.Column("registered_at", sa.BigInteger(), nullable=False),
        sa.Column("sign", sa.String(255), nullable=False, server_default=""),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
    )

    op.create_table(
        "user_groups",
        sa.Column("id", sa.SmallInteger(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False, server_default=""),
        sa.Column("permission", sa.Text(), nullable=False, server_default=""),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "access_tokens",
        sa.Column("token", sa.String(255), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("expires_at", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("token"),
    )
    op.create_index("idx_access_tokens_user_id", "access_tokens", ["user_id"])

    op.create_table(
        "friends",
        sa.Column("owner_id", sa.Integer(), nullable=False),
        sa.Column("friend_id", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("owner_id", "friend_id"),
    )

    # ========================================================================
    # GROUPS
    # ========================================================================
    op.create_table(
        "groups",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("nsfw", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("accessible", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column("member_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.BigInteger(), nullable=False, server_default="0"),
        sa.Column("icon", sa.String(255), nullable=False, server_default=""),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "group_members",
        sa.Column("group_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("moderator", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("joined_at", sa.BigInteger(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("group_id", "user_id"),
    )
    op.create_index(
        "idx_group_members_group_joined", "group_members", ["group_id", "joined_at"]
    )

    # ========================================================================
    # TOPICS AND REPLIES
    # ========================================================================
    op.create_table(
        "group_topics",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("group_id", sa.Integer(), nullable=False),
        sa.Column("creator_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(80), nullable=False),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.Column("updated_at", sa.BigInteger(), nullable=False),
        sa.Column("dateline", sa.BigInteger(), nullable=False),
        sa.Column("replies", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("state", sa.SmallInteger(), nullable=False, server_default="0"),
        sa.Column("display", sa.SmallInteger(), nullable=False, server_default="1"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_group_topics_listing",
        "group_topics",
        ["group_id", "display", "dateline"],
    )

    op.create_table(
        "group_posts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("topic_id", sa.Integer(), nullable=False),
        sa.Column("creator_id", sa.Integer(), nullable=False),
        sa.Column("related", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("state", sa.SmallInteger(), nullable=False, server_default="0"),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_group_posts_topic_id", "group_posts", ["topic_id"])

    # ========================================================================
    # SUBJECTS
    # ========================================================================
    op.create_table(
        "subjects",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("nsfw", sa.Boolean(), nullable=False, server_default="false"),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # NOTIFICATIONS
    # ========================================================================
    op.create_table(
        "notifications",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("dest_user_id", sa.Integer(), nullable=False),
        sa.Column("source_user_id", sa.Integer(), nullable=False),
        sa.Column("type", sa.SmallInteger(), nullable=False),
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("topic_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("created_at", sa.BigInteger(), nullable=False),
        sa.Column("unread", sa.Boolean(), nullable=False, server_default="true"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_notifications_dest_user_id", "notifications", ["dest_user_id"]
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("notifications")
    op.drop_table("subjects")
    op.drop_table("group_posts")
    op.drop_table("group_topics")
    op.drop_table("group_members")
    op.drop_table("groups")
    op.drop_table("friends")
    op.drop_table("access_tokens")
    op.drop_table("user_groups")
    op.drop_table("users")
