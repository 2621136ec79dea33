"""In-memory user, role, token and friend repositories for testing."""

from typing import Optional

from forum.domain.model import AccessToken, User, UserGroup
from forum.domain.repository import (
    AccessTokenRepository,
    FriendRepository,
    UserGroupRepository,
    UserRepository,
)
from forum.domain.value import UserGroupId, UserId

from .database import InMemoryDatabase


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db
        self.batch_calls = 0

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self.db.users.get(user_id)

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find users by ID; counts calls so tests can check batching."""
        self.batch_calls += 1
        return [self.db.users[i] for i in user_ids if i in self.db.users]

    async def save(self, user: User) -> User:
        """Save a user."""
        self.db.users[user.id] = user
        return user


class InMemoryUserGroupRepository(UserGroupRepository):
    """In-memory implementation of UserGroupRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def find_by_id(self, group_id: UserGroupId) -> Optional[UserGroup]:
        return self.db.user_groups.get(group_id)

    async def save(self, user_group: UserGroup) -> UserGroup:
        self.db.user_groups[user_group.id] = user_group
        return user_group


class InMemoryAccessTokenRepository(AccessTokenRepository):
    """In-memory implementation of AccessTokenRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def find_valid(self, token: str, now: int) -> Optional[AccessToken]:
        found = self.db.access_tokens.get(token)
        if found is None or not found.is_valid_at(now):
            return None
        return found

    async def save(self, token: AccessToken) -> AccessToken:
        self.db.access_tokens[token.token] = token
        return token


class InMemoryFriendRepository(FriendRepository):
    """In-memory implementation of FriendRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def find_friend_ids(self, owner_id: UserId) -> list[UserId]:
        return [friend for owner, friend in self.db.friends if owner == owner_id]

    async def add(self, owner_id: UserId, friend_id: UserId) -> None:
        self.db.friends.add((owner_id, friend_id))
