"""User, role and access token repository interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.user import AccessToken, User, UserGroup
from forum.domain.value import UserGroupId, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: list[UserId]) -> list[User]:
        """Find all users whose ID is in ``user_ids`` with a single query.

        Missing IDs are silently skipped.

        Args:
            user_ids: Deduplicated user IDs

        Returns:
            Users found, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update)."""
        pass


class UserGroupRepository(ABC):
    """Repository for user roles and their permission bags."""

    @abstractmethod
    async def find_by_id(self, group_id: UserGroupId) -> Optional[UserGroup]:
        """Find a user group by ID."""
        pass

    @abstractmethod
    async def save(self, user_group: UserGroup) -> UserGroup:
        """Save a user group (create or update)."""
        pass


class AccessTokenRepository(ABC):
    """Repository for session and API access tokens."""

    @abstractmethod
    async def find_valid(self, token: str, now: int) -> Optional[AccessToken]:
        """Find a token that has not expired at ``now``.

        Args:
            token: Opaque credential string
            now: Current unix time in seconds

        Returns:
            The token if it exists and is unexpired, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, token: AccessToken) -> AccessToken:
        """Save an access token."""
        pass
