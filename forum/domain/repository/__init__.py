"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from forum.domain.repository.friend import FriendRepository
from forum.domain.repository.group import GroupMemberRepository, GroupRepository
from forum.domain.repository.notification import NotificationSink
from forum.domain.repository.reply import ReplyRepository
from forum.domain.repository.subject import SubjectRepository
from forum.domain.repository.topic import TopicRepository
from forum.domain.repository.transaction import UnitOfWork
from forum.domain.repository.user import (
    AccessTokenRepository,
    UserGroupRepository,
    UserRepository,
)

__all__ = [
    "UserRepository",
    "UserGroupRepository",
    "AccessTokenRepository",
    "FriendRepository",
    "GroupRepository",
    "GroupMemberRepository",
    "TopicRepository",
    "ReplyRepository",
    "SubjectRepository",
    "NotificationSink",
    "UnitOfWork",
]
