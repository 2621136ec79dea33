"""User directory domain service."""

from typing import Iterable

import logfire

from forum.domain.error import DataIntegrityError
from forum.domain.model.user import User
from forum.domain.repository import FriendRepository, UserRepository
from forum.domain.value import UserId

from .base import Service


class UserService(Service):
    """Domain service for user lookups."""

    def __init__(
        self, user_repository: UserRepository, friend_repository: FriendRepository
    ) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            friend_repository: Friend relation repository
        """
        self.user_repository = user_repository
        self.friend_repository = friend_repository

    async def fetch_users(self, user_ids: Iterable[UserId]) -> dict[UserId, User]:
        """Fetch many users in one batch.

        Args:
            user_ids: User IDs, duplicates allowed

        Returns:
            Mapping of ID to user; IDs with no user are absent
        """
        unique_ids = list(dict.fromkeys(user_ids))
        if not unique_ids:
            return {}

        with logfire.span("user_service.fetch_users", count=len(unique_ids)):
            users = await self.user_repository.find_by_ids(unique_ids)
            found = {user.id: user for user in users}
            if len(found) != len(unique_ids):
                logfire.warn(
                    "Some users not found",
                    missing=[i for i in unique_ids if i not in found],
                )
            return found

    async def get_user(self, user_id: UserId) -> User:
        """Get a user that must exist.

        Args:
            user_id: User ID

        Returns:
            The user

        Raises:
            DataIntegrityError: If the user does not exist
        """
        with logfire.span("user_service.get_user", user_id=user_id):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.error("Referenced user missing", user_id=user_id)
                raise DataIntegrityError(f"user {user_id}")
            return user

    async def fetch_friends(self, owner_id: UserId) -> dict[UserId, bool]:
        """Fetch the friend set of a user.

        Args:
            owner_id: User whose friends to load, 0 for anonymous

        Returns:
            Mapping of friend ID to True
        """
        if owner_id == 0:
            return {}

        with logfire.span("user_service.fetch_friends", owner_id=owner_id):
            friend_ids = await self.friend_repository.find_friend_ids(owner_id)
            return {friend_id: True for friend_id in friend_ids}
