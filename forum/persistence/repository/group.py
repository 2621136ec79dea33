"""PostgreSQL implementations of group and membership repositories."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Group, GroupMember
from forum.domain.repository import GroupMemberRepository, GroupRepository
from forum.domain.value import GroupId, UserId
from forum.persistence.mappers import row_to_group, row_to_group_member
from forum.persistence.tables import group_members_table, groups_table


class PostgresGroupRepository(GroupRepository):
    """PostgreSQL implementation of GroupRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, group_id: GroupId) -> Optional[Group]:
        """Find a group by ID."""
        with logfire.span("group_repository.find_by_id", group_id=group_id):
            stmt = select(groups_table).where(groups_table.c.id == group_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_group(row._asdict()) if row else None

    async def find_by_name(self, name: str) -> Optional[Group]:
        """Find a group by name."""
        with logfire.span("group_repository.find_by_name", name=name):
            stmt = select(groups_table).where(groups_table.c.name == name)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_group(row._asdict()) if row else None

    async def save(self, group: Group) -> Group:
        """Insert or update a group."""
        data = group.model_dump(mode="json")
        stmt = insert(groups_table).values(**data)
        stmt = stmt.on_conflict_do_update(
            index_elements=[groups_table.c.id],
            set_={k: v for k, v in data.items() if k != "id"},
        )
        await self.session.execute(stmt)
        return group


class PostgresGroupMemberRepository(GroupMemberRepository):
    """PostgreSQL implementation of GroupMemberRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _filter(stmt, group_id: GroupId, moderator: Optional[bool]):
        stmt = stmt.where(group_members_table.c.group_id == group_id)
        if moderator is not None:
            stmt = stmt.where(group_members_table.c.moderator == moderator)
        return stmt

    async def find_by_group(
        self,
        group_id: GroupId,
        moderator: Optional[bool] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> List[GroupMember]:
        """Find members of a group, most recently joined first."""
        with logfire.span(
            "group_member_repository.find_by_group",
            group_id=group_id,
            moderator=moderator,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filter(select(group_members_table), group_id, moderator)
            stmt = (
                stmt.order_by(desc(group_members_table.c.joined_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_group_member(row._asdict()) for row in result.fetchall()]

    async def count(self, group_id: GroupId, moderator: Optional[bool] = None) -> int:
        """Count members of a group."""
        stmt = self._filter(
            select(func.count()).select_from(group_members_table), group_id, moderator
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def exists(self, group_id: GroupId, user_id: UserId) -> bool:
        """Whether a user is a member of a group."""
        stmt = (
            select(func.count())
            .select_from(group_members_table)
            .where(
                group_members_table.c.group_id == group_id,
                group_members_table.c.user_id == user_id,
            )
        )
        result = await self.session.execute(stmt)
        return (result.scalar() or 0) > 0

    async def save(self, member: GroupMember) -> GroupMember:
        """Insert or update a membership."""
        data = member.model_dump(mode="json")
        stmt = insert(group_members_table).values(**data)
        stmt = stmt.on_conflict_do_update(
            index_elements=[group_members_table.c.group_id, group_members_table.c.user_id],
            set_={"moderator": member.moderator, "joined_at": member.joined_at},
        )
        await self.session.execute(stmt)
        return member
