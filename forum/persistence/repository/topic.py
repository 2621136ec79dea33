"""PostgreSQL implementation of Topic repository."""

from typing import List, Optional, Sequence

import logfire
from sqlalchemy import desc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Topic
from forum.domain.repository import TopicRepository
from forum.domain.value import GroupId, TopicDisplay, TopicId
from forum.persistence.mappers import row_to_topic, topic_to_dict
from forum.persistence.tables import group_topics_table


class PostgresTopicRepository(TopicRepository):
    """PostgreSQL implementation of TopicRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, topic_id: TopicId, for_update: bool = False
    ) -> Optional[Topic]:
        """Find a topic by ID, optionally locking its row."""
        with logfire.span(
            "topic_repository.find_by_id", topic_id=topic_id, for_update=for_update
        ):
            stmt = select(group_topics_table).where(group_topics_table.c.id == topic_id)
            if for_update:
                stmt = stmt.with_for_update()
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                logfire.warn("Topic not found", topic_id=topic_id)
                return None

            return row_to_topic(row._asdict())

    async def find_by_group(
        self,
        group_id: GroupId,
        displays: Sequence[TopicDisplay],
        limit: int = 30,
        offset: int = 0,
    ) -> List[Topic]:
        """Find topics of a group ordered by ordering score."""
        with logfire.span(
            "topic_repository.find_by_group",
            group_id=group_id,
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(group_topics_table)
                .where(
                    group_topics_table.c.group_id == group_id,
                    group_topics_table.c.display.in_([int(d) for d in displays]),
                )
                .order_by(
                    desc(group_topics_table.c.dateline), desc(group_topics_table.c.id)
                )
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            topics = [row_to_topic(row._asdict()) for row in result.fetchall()]
            logfire.info("Found topics", count=len(topics))
            return topics

    async def count_by_group(
        self, group_id: GroupId, displays: Sequence[TopicDisplay]
    ) -> int:
        """Count topics of a group."""
        stmt = (
            select(func.count())
            .select_from(group_topics_table)
            .where(
                group_topics_table.c.group_id == group_id,
                group_topics_table.c.display.in_([int(d) for d in displays]),
            )
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, topic: Topic) -> Topic:
        """Insert a new topic or update an existing one."""
        with logfire.span("topic_repository.save", topic_id=topic.id):
            data = topic_to_dict(topic)
            if topic.id:
                stmt = (
                    update(group_topics_table)
                    .where(group_topics_table.c.id == topic.id)
                    .values(**data)
                )
                await self.session.execute(stmt)
                return topic

            stmt = (
                insert(group_topics_table)
                .values(**data)
                .returning(group_topics_table.c.id)
            )
            result = await self.session.execute(stmt)
            topic_id = TopicId(result.scalar_one())
            logfire.info("Inserted topic", topic_id=topic_id)
            return topic.model_copy(update={"id": topic_id})

    async def record_reply(
        self, topic_id: TopicId, updated_at: int, dateline: Optional[int]
    ) -> None:
        """Increment the reply counter and bump timestamps in one UPDATE."""
        with logfire.span(
            "topic_repository.record_reply", topic_id=topic_id, dateline=dateline
        ):
            values = {
                "replies": group_topics_table.c.replies + 1,
                "updated_at": updated_at,
            }
            if dateline is not None:
                values["dateline"] = dateline
            stmt = (
                update(group_topics_table)
                .where(group_topics_table.c.id == topic_id)
                .values(**values)
            )
            await self.session.execute(stmt)
