"""Group directory domain service."""

from typing import Optional

import logfire

from forum.domain.model.group import Group, GroupMember
from forum.domain.repository import GroupMemberRepository, GroupRepository
from forum.domain.value import GroupId, MemberRole, UserId

from .base import Service


class GroupService(Service):
    """Domain service for group and membership lookups."""

    def __init__(
        self,
        group_repository: GroupRepository,
        member_repository: GroupMemberRepository,
        recent_member_limit: int = 6,
    ) -> None:
        """Initialize group service.

        Args:
            group_repository: Group repository
            member_repository: Group member repository
            recent_member_limit: Members shown on a group profile
        """
        self.group_repository = group_repository
        self.member_repository = member_repository
        self.recent_member_limit = recent_member_limit

    async def get_group_by_name(self, name: str) -> Optional[Group]:
        """Get a group by its name.

        Args:
            name: Group name

        Returns:
            Group if found, None otherwise
        """
        with logfire.span("group_service.get_group_by_name", name=name):
            group = await self.group_repository.find_by_name(name)
            if group is None:
                logfire.warn("Group not found", name=name)
            return group

    async def get_group_by_id(self, group_id: GroupId) -> Optional[Group]:
        """Get a group by ID."""
        with logfire.span("group_service.get_group_by_id", group_id=group_id):
            return await self.group_repository.find_by_id(group_id)

    async def list_members(
        self,
        group_id: GroupId,
        role: MemberRole = MemberRole.ALL,
        limit: int = 30,
        offset: int = 0,
    ) -> tuple[int, list[GroupMember]]:
        """List members of a group, most recently joined first.

        Args:
            group_id: Group ID
            role: Which members to include
            limit: Page size
            offset: Page offset

        Returns:
            Tuple of (total matching members, page of members)
        """
        moderator = _moderator_filter(role)
        with logfire.span(
            "group_service.list_members",
            group_id=group_id,
            role=role.value,
            limit=limit,
            offset=offset,
        ):
            total = await self.member_repository.count(group_id, moderator)
            if total == 0:
                return 0, []
            members = await self.member_repository.find_by_group(
                group_id, moderator, limit=limit, offset=offset
            )
            return total, members

    async def recent_members(self, group_id: GroupId) -> list[GroupMember]:
        """The few members who joined a group most recently."""
        _, members = await self.list_members(
            group_id, MemberRole.ALL, limit=self.recent_member_limit
        )
        return members

    async def is_member(self, group_id: GroupId, user_id: UserId) -> bool:
        """Whether a user has joined a group. Anonymous users never have."""
        if user_id == 0:
            return False
        return await self.member_repository.exists(group_id, user_id)


def _moderator_filter(role: MemberRole) -> Optional[bool]:
    if role == MemberRole.MOD:
        return True
    if role == MemberRole.NORMAL:
        return False
    return None
