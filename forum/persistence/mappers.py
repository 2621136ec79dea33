"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from forum.domain.model import (
    AccessToken,
    Group,
    GroupMember,
    Notification,
    Reply,
    Subject,
    Topic,
    User,
    UserGroup,
)
from forum.domain.value import (
    GroupId,
    ReplyId,
    ReplyState,
    SubjectId,
    TopicDisplay,
    TopicId,
    UserGroupId,
    UserId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        username=row["username"],
        nickname=row["nickname"],
        avatar=row.get("avatar") or "",
        group_id=UserGroupId(row["group_id"]),
        registered_at=row["registered_at"],
        sign=row.get("sign") or "",
    )


def row_to_user_group(row: Dict[str, Any]) -> UserGroup:
    """Convert database row to UserGroup domain model."""
    return UserGroup(
        id=UserGroupId(row["id"]),
        name=row.get("name") or "",
        permission=row.get("permission") or "",
    )


def row_to_access_token(row: Dict[str, Any]) -> AccessToken:
    """Convert database row to AccessToken domain model."""
    return AccessToken(
        token=row["token"],
        user_id=UserId(row["user_id"]),
        expires_at=row["expires_at"],
    )


def row_to_group(row: Dict[str, Any]) -> Group:
    """Convert database row to Group domain model.

    Args:
        row: Database row as dict

    Returns:
        Group domain model
    """
    return Group(
        id=GroupId(row["id"]),
        name=row["name"],
        title=row["title"],
        description=row.get("description") or "",
        nsfw=row["nsfw"],
        accessible=row["accessible"],
        member_count=row["member_count"],
        created_at=row["created_at"],
        icon=row.get("icon") or "",
    )


def row_to_group_member(row: Dict[str, Any]) -> GroupMember:
    """Convert database row to GroupMember domain model."""
    return GroupMember(
        group_id=GroupId(row["group_id"]),
        user_id=UserId(row["user_id"]),
        moderator=row["moderator"],
        joined_at=row["joined_at"],
    )


def row_to_topic(row: Dict[str, Any]) -> Topic:
    """Convert database row to Topic domain model.

    Args:
        row: Database row as dict

    Returns:
        Topic domain model
    """
    return Topic(
        id=TopicId(row["id"]),
        group_id=GroupId(row["group_id"]),
        creator_id=UserId(row["creator_id"]),
        title=row["title"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        dateline=row["dateline"],
        replies=row["replies"],
        state=ReplyState(row["state"]),
        display=TopicDisplay(row["display"]),
    )


def topic_to_dict(topic: Topic) -> Dict[str, Any]:
    """Convert Topic domain model to database dict.

    The ID is left out for new topics so the database assigns one.
    """
    data = topic.model_dump(mode="json")
    if not topic.id:
        data.pop("id")
    return data


def row_to_reply(row: Dict[str, Any]) -> Reply:
    """Convert database row to Reply domain model."""
    return Reply(
        id=ReplyId(row["id"]),
        topic_id=TopicId(row["topic_id"]),
        creator_id=UserId(row["creator_id"]),
        content=row["content"],
        created_at=row["created_at"],
        state=ReplyState(row["state"]),
        related=ReplyId(row["related"]),
    )


def reply_to_dict(reply: Reply) -> Dict[str, Any]:
    """Convert Reply domain model to database dict.

    The ID is left out for new replies so the database assigns one.
    """
    data = reply.model_dump(mode="json")
    if not reply.id:
        data.pop("id")
    return data


def row_to_subject(row: Dict[str, Any]) -> Subject:
    """Convert database row to Subject domain model."""
    return Subject(id=SubjectId(row["id"]), name=row["name"], nsfw=row["nsfw"])


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict."""
    return notification.model_dump(mode="json")
