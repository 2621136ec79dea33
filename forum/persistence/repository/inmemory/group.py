"""In-memory group and membership repositories for testing."""

from typing import List, Optional

from forum.domain.model import Group, GroupMember
from forum.domain.repository import GroupMemberRepository, GroupRepository
from forum.domain.value import GroupId, UserId

from .database import InMemoryDatabase


class InMemoryGroupRepository(GroupRepository):
    """In-memory implementation of GroupRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        """Find a group by ID."""
        return self.db.groups.get(group_id)

    async def find_by_name(self, name: str) -> Optional[Group]:
        """Find a group by name."""
        for group in self.db.groups.values():
            if group.name == name:
                return group
        return None

    async def save(self, group: Group) -> Group:
        """Save a group."""
        self.db.groups[group.id] = group
        return group


class InMemoryGroupMemberRepository(GroupMemberRepository):
    """In-memory implementation of GroupMemberRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    def _matching(
        self, group_id: GroupId, moderator: Optional[bool]
    ) -> list[GroupMember]:
        return [
            m
            for m in self.db.group_members.values()
            if m.group_id == group_id and (moderator is None or m.moderator == moderator)
        ]

    async def find_by_group(
        self,
        group_id: GroupId,
        moderator: Optional[bool] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> List[GroupMember]:
        """Find members of a group, most recently joined first."""
        members = self._matching(group_id, moderator)
        members.sort(key=lambda m: m.joined_at, reverse=True)
        return members[offset : offset + limit]

    async def count(self, group_id: GroupId, moderator: Optional[bool] = None) -> int:
        """Count members of a group."""
        return len(self._matching(group_id, moderator))

    async def exists(self, group_id: GroupId, user_id: UserId) -> bool:
        """Whether a user is a member of a group."""
        return (group_id, user_id) in self.db.group_members

    async def save(self, member: GroupMember) -> GroupMember:
        """Save a membership."""
        self.db.group_members[(member.group_id, member.user_id)] = member
        return member
