"""PostgreSQL implementation of Reply repository."""

from typing import List, Optional

import logfire
from sqlalchemy import asc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Reply
from forum.domain.repository import ReplyRepository
from forum.domain.value import ReplyId, TopicId
from forum.persistence.mappers import reply_to_dict, row_to_reply
from forum.persistence.tables import group_posts_table


class PostgresReplyRepository(ReplyRepository):
    """PostgreSQL implementation of ReplyRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        stmt = select(group_posts_table).where(group_posts_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_reply(row._asdict()) if row else None

    async def find_by_topic(self, topic_id: TopicId) -> List[Reply]:
        """Find all rows of a topic in ID order."""
        with logfire.span("reply_repository.find_by_topic", topic_id=topic_id):
            stmt = (
                select(group_posts_table)
                .where(group_posts_table.c.topic_id == topic_id)
                .order_by(asc(group_posts_table.c.id))
            )
            result = await self.session.execute(stmt)
            replies = [row_to_reply(row._asdict()) for row in result.fetchall()]
            logfire.info("Found replies", topic_id=topic_id, count=len(replies))
            return replies

    async def save(self, reply: Reply) -> Reply:
        """Insert a new reply or update an existing one."""
        with logfire.span("reply_repository.save", topic_id=reply.topic_id):
            data = reply_to_dict(reply)
            if reply.id:
                stmt = (
                    update(group_posts_table)
                    .where(group_posts_table.c.id == reply.id)
                    .values(**data)
                )
                await self.session.execute(stmt)
                return reply

            stmt = (
                insert(group_posts_table)
                .values(**data)
                .returning(group_posts_table.c.id)
            )
            result = await self.session.execute(stmt)
            reply_id = ReplyId(result.scalar_one())
            logfire.info("Inserted reply", reply_id=reply_id, topic_id=reply.topic_id)
            return reply.model_copy(update={"id": reply_id})
