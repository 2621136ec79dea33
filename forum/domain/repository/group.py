"""Group and group member repository interfaces."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.group import Group, GroupMember
from forum.domain.value import GroupId, UserId


class GroupRepository(ABC):
    """Repository for Group aggregate."""

    @abstractmethod
    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        """Find a group by ID.

        Args:
            group_id: The group's unique identifier

        Returns:
            The group if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Group]:
        """Find a group by its unique name (URL slug).

        Args:
            name: Group name

        Returns:
            The group if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, group: Group) -> Group:
        """Save a group (create or update)."""
        pass


class GroupMemberRepository(ABC):
    """Repository for group memberships."""

    @abstractmethod
    async def find_by_group(
        self,
        group_id: GroupId,
        moderator: Optional[bool] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> List[GroupMember]:
        """Find members of a group, most recently joined first.

        Args:
            group_id: Group ID
            moderator: True for moderators only, False for regular members
                only, None for everyone
            limit: Maximum number of members to return
            offset: Number of members to skip

        Returns:
            List of memberships
        """
        pass

    @abstractmethod
    async def count(self, group_id: GroupId, moderator: Optional[bool] = None) -> int:
        """Count members of a group with the same filter as ``find_by_group``."""
        pass

    @abstractmethod
    async def exists(self, group_id: GroupId, user_id: UserId) -> bool:
        """Whether ``user_id`` is a member of ``group_id``."""
        pass

    @abstractmethod
    async def save(self, member: GroupMember) -> GroupMember:
        """Save a membership."""
        pass
