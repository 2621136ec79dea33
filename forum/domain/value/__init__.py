"""Domain value objects for the forum."""

from forum.domain.value.identifiers import (
    GroupId,
    NotificationId,
    ReplyId,
    SubjectId,
    TopicId,
    UserGroupId,
    UserId,
)
from forum.domain.value.types import (
    Auth,
    MemberRole,
    Nested,
    NotificationType,
    Permission,
    Placement,
    ReplyState,
    TopicDisplay,
    TopicType,
    TopLevel,
)

__all__ = [
    # Identifiers
    "UserId",
    "UserGroupId",
    "GroupId",
    "TopicId",
    "ReplyId",
    "SubjectId",
    "NotificationId",
    # Types
    "Auth",
    "MemberRole",
    "Nested",
    "NotificationType",
    "Permission",
    "Placement",
    "ReplyState",
    "TopicDisplay",
    "TopicType",
    "TopLevel",
]
