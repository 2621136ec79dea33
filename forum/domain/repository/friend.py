"""Friend repository interface."""

from abc import ABC, abstractmethod

from forum.domain.value import UserId


class FriendRepository(ABC):
    """Repository for the directed friend relation."""

    @abstractmethod
    async def find_friend_ids(self, owner_id: UserId) -> list[UserId]:
        """Return IDs of everyone ``owner_id`` has added as a friend."""
        pass

    @abstractmethod
    async def add(self, owner_id: UserId, friend_id: UserId) -> None:
        """Record that ``owner_id`` added ``friend_id`` as a friend."""
        pass
