"""Shared in-memory store backing the in-memory repositories."""

from dataclasses import dataclass, field, fields

from forum.domain.model import (
    AccessToken,
    Group,
    GroupMember,
    Reply,
    Subject,
    Topic,
    User,
    UserGroup,
)
from forum.domain.value import (
    GroupId,
    ReplyId,
    SubjectId,
    TopicId,
    UserGroupId,
    UserId,
)


@dataclass
class InMemoryDatabase:
    """Tables of an in-memory forum.

    Repositories created over the same instance see each other's writes,
    the way repositories sharing a database session do.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    user_groups: dict[UserGroupId, UserGroup] = field(default_factory=dict)
    access_tokens: dict[str, AccessToken] = field(default_factory=dict)
    friends: set[tuple[UserId, UserId]] = field(default_factory=set)
    groups: dict[GroupId, Group] = field(default_factory=dict)
    group_members: dict[tuple[GroupId, UserId], GroupMember] = field(
        default_factory=dict
    )
    topics: dict[TopicId, Topic] = field(default_factory=dict)
    replies: dict[ReplyId, Reply] = field(default_factory=dict)
    subjects: dict[SubjectId, Subject] = field(default_factory=dict)

    def snapshot(self) -> dict:
        """Copy every table. Rows are immutable, so shallow copies suffice."""
        return {f.name: getattr(self, f.name).copy() for f in fields(self)}

    def restore(self, snapshot: dict) -> None:
        """Put every table back to a previous snapshot."""
        for name, table in snapshot.items():
            setattr(self, name, table)
