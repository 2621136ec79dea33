"""PostgreSQL repository implementations."""

from forum.persistence.repository.group import (
    PostgresGroupMemberRepository,
    PostgresGroupRepository,
)
from forum.persistence.repository.reply import PostgresReplyRepository
from forum.persistence.repository.subject import PostgresSubjectRepository
from forum.persistence.repository.topic import PostgresTopicRepository
from forum.persistence.repository.unit_of_work import PostgresUnitOfWork
from forum.persistence.repository.user import (
    PostgresAccessTokenRepository,
    PostgresFriendRepository,
    PostgresUserGroupRepository,
    PostgresUserRepository,
)

__all__ = [
    "PostgresUserRepository",
    "PostgresUserGroupRepository",
    "PostgresAccessTokenRepository",
    "PostgresFriendRepository",
    "PostgresGroupRepository",
    "PostgresGroupMemberRepository",
    "PostgresTopicRepository",
    "PostgresReplyRepository",
    "PostgresSubjectRepository",
    "PostgresUnitOfWork",
]
