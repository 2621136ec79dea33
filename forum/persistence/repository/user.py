"""PostgreSQL implementations of user, role, token and friend repositories."""

from typing import Optional

import logfire
from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import AccessToken, User, UserGroup
from forum.domain.repository import (
    AccessTokenRepository,
    FriendRepository,
    UserGroupRepository,
    UserRepository,
)
from forum.domain.value import UserGroupId, UserId
from forum.persistence.mappers import (
    row_to_access_token,
    row_to_user,
    row_to_user_group,
)
from forum.persistence.tables import (
    access_tokens_table,
    friends_table,
    user_groups_table,
    users_table,
)


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        with logfire.span("user_repository.find_by_id", user_id=user_id):
            stmt = select(users_table).where(users_table.c.id == user_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_user(row._asdict()) if row else None

    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find users by ID in a single query."""
        if not user_ids:
            return []
        with logfire.span("user_repository.find_by_ids", count=len(user_ids)):
            stmt = select(users_table).where(users_table.c.id.in_(user_ids))
            result = await self.session.execute(stmt)
            return [row_to_user(row._asdict()) for row in result.fetchall()]

    async def save(self, user: User) -> User:
        """Insert or update a user."""
        with logfire.span("user_repository.save", user_id=user.id):
            data = user.model_dump(mode="json")
            stmt = insert(users_table).values(**data)
            stmt = stmt.on_conflict_do_update(
                index_elements=[users_table.c.id],
                set_={k: v for k, v in data.items() if k != "id"},
            )
            await self.session.execute(stmt)
            return user


class PostgresUserGroupRepository(UserGroupRepository):
    """PostgreSQL implementation of UserGroupRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, group_id: UserGroupId) -> Optional[UserGroup]:
        """Find a user group by ID."""
        stmt = select(user_groups_table).where(user_groups_table.c.id == group_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if not row:
            logfire.warn("User group not found", user_group_id=group_id)
            return None
        return row_to_user_group(row._asdict())

    async def save(self, user_group: UserGroup) -> UserGroup:
        """Insert or update a user group."""
        data = user_group.model_dump(mode="json")
        stmt = insert(user_groups_table).values(**data)
        stmt = stmt.on_conflict_do_update(
            index_elements=[user_groups_table.c.id],
            set_={k: v for k, v in data.items() if k != "id"},
        )
        await self.session.execute(stmt)
        return user_group


class PostgresAccessTokenRepository(AccessTokenRepository):
    """PostgreSQL implementation of AccessTokenRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_valid(self, token: str, now: int) -> Optional[AccessToken]:
        """Find an unexpired token."""
        with logfire.span("access_token_repository.find_valid"):
            stmt = select(access_tokens_table).where(
                access_tokens_table.c.token == token,
                access_tokens_table.c.expires_at >= now,
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_access_token(row._asdict()) if row else None

    async def save(self, token: AccessToken) -> AccessToken:
        """Insert or update a token."""
        data = token.model_dump(mode="json")
        stmt = insert(access_tokens_table).values(**data)
        stmt = stmt.on_conflict_do_update(
            index_elements=[access_tokens_table.c.token],
            set_={"user_id": token.user_id, "expires_at": token.expires_at},
        )
        await self.session.execute(stmt)
        return token


class PostgresFriendRepository(FriendRepository):
    """PostgreSQL implementation of FriendRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_friend_ids(self, owner_id: UserId) -> list[UserId]:
        """Return IDs of the owner's friends."""
        stmt = select(friends_table.c.friend_id).where(
            friends_table.c.owner_id == owner_id
        )
        result = await self.session.execute(stmt)
        return [UserId(friend_id) for friend_id in result.scalars().all()]

    async def add(self, owner_id: UserId, friend_id: UserId) -> None:
        """Record a friend, ignoring duplicates."""
        stmt = (
            insert(friends_table)
            .values(owner_id=owner_id, friend_id=friend_id)
            .on_conflict_do_nothing()
        )
        await self.session.execute(stmt)
