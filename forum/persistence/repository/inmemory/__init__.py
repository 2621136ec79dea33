"""In-memory repository implementations for testing."""

from .database import InMemoryDatabase
from .group import InMemoryGroupMemberRepository, InMemoryGroupRepository
from .reply import InMemoryReplyRepository
from .subject import InMemorySubjectRepository
from .topic import InMemoryTopicRepository
from .unit_of_work import InMemoryUnitOfWork
from .user import (
    InMemoryAccessTokenRepository,
    InMemoryFriendRepository,
    InMemoryUserGroupRepository,
    InMemoryUserRepository,
)

__all__ = [
    "InMemoryDatabase",
    "InMemoryUserRepository",
    "InMemoryUserGroupRepository",
    "InMemoryAccessTokenRepository",
    "InMemoryFriendRepository",
    "InMemoryGroupRepository",
    "InMemoryGroupMemberRepository",
    "InMemoryTopicRepository",
    "InMemoryReplyRepository",
    "InMemorySubjectRepository",
    "InMemoryUnitOfWork",
]
