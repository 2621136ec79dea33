"""Topic domain service: listings, thread assembly and creation."""

import time
from collections import defaultdict
from typing import Optional, Sequence

import logfire

from forum.domain.error import (
    DataIntegrityError,
    NotAllowedError,
    NotFoundError,
    UnimplementedError,
)
from forum.domain.model.reply import Reply, ThreadReply, TopicDetail
from forum.domain.model.topic import Topic
from forum.domain.repository import ReplyRepository, TopicRepository, UnitOfWork
from forum.domain.value import (
    GroupId,
    Nested,
    ReplyId,
    ReplyState,
    TopicDisplay,
    TopicId,
    TopicType,
    UserId,
)

from .base import Service
from .ranking import compute_ordering_score


def assemble_thread(rows: Sequence[Reply]) -> tuple[Reply, list[ThreadReply]]:
    """Build the reply tree of a topic from its flat rows.

    Args:
        rows: Every reply row of a topic, ordered by ID ascending

    Returns:
        Tuple of (topic body, top-level replies each with its nested replies)

    Raises:
        DataIntegrityError: If there is no body row
    """
    if not rows:
        raise DataIntegrityError("topic body post")

    top, *rest = rows

    nested: dict[ReplyId, list[Reply]] = defaultdict(list)
    top_level: list[Reply] = []
    for reply in rest:
        match reply.placement:
            case Nested(parent_id=parent_id):
                nested[parent_id].append(reply)
            case _:
                top_level.append(reply)

    threads = [ThreadReply(reply=r, replies=nested.get(r.id, [])) for r in top_level]
    return top, threads


class TopicService(Service):
    """Domain service for topic and reply operations."""

    def __init__(
        self,
        topic_repository: TopicRepository,
        reply_repository: ReplyRepository,
        unit_of_work: UnitOfWork,
    ) -> None:
        """Initialize topic service.

        Args:
            topic_repository: Topic repository
            reply_repository: Reply repository
            unit_of_work: Transaction boundary for multi-row writes
        """
        self.topic_repository = topic_repository
        self.reply_repository = reply_repository
        self.unit_of_work = unit_of_work

    async def list_topics(
        self,
        topic_type: TopicType,
        scope_id: int,
        displays: Sequence[TopicDisplay],
        limit: int = 30,
        offset: int = 0,
    ) -> tuple[int, list[Topic]]:
        """List topics of a scope, most recently active first.

        Args:
            topic_type: Kind of scope
            scope_id: Group (or subject) ID
            displays: Display states the viewer may see
            limit: Page size
            offset: Page offset

        Returns:
            Tuple of (total visible topics, page of topics)

        Raises:
            UnimplementedError: For subject scopes
        """
        if topic_type == TopicType.SUBJECT:
            raise UnimplementedError("subject topics")

        with logfire.span(
            "topic_service.list_topics",
            scope_id=scope_id,
            displays=[d.name for d in displays],
            limit=limit,
            offset=offset,
        ):
            group_id = GroupId(scope_id)
            total = await self.topic_repository.count_by_group(group_id, displays)
            if total == 0:
                return 0, []
            topics = await self.topic_repository.find_by_group(
                group_id, displays, limit=limit, offset=offset
            )
            logfire.info("Found topics", total=total, count=len(topics))
            return total, topics

    async def get_topic(self, topic_id: TopicId) -> Optional[Topic]:
        """Get a topic by ID."""
        with logfire.span("topic_service.get_topic", topic_id=topic_id):
            topic = await self.topic_repository.find_by_id(topic_id)
            if topic is None:
                logfire.warn("Topic not found", topic_id=topic_id)
            return topic

    async def get_topic_detail(
        self, topic_type: TopicType, topic_id: TopicId
    ) -> Optional[TopicDetail]:
        """Load a topic with its body and assembled reply thread.

        Replies are returned unfiltered; visibility is up to the caller.

        Args:
            topic_type: Kind of scope
            topic_id: Topic ID

        Returns:
            Topic detail, or None if the topic does not exist

        Raises:
            UnimplementedError: For subject scopes
            DataIntegrityError: If the topic has no body post
        """
        if topic_type == TopicType.SUBJECT:
            raise UnimplementedError("subject topics")

        with logfire.span("topic_service.get_topic_detail", topic_id=topic_id):
            topic = await self.topic_repository.find_by_id(topic_id)
            if topic is None:
                logfire.warn("Topic not found", topic_id=topic_id)
                return None

            rows = await self.reply_repository.find_by_topic(topic_id)
            try:
                top, threads = assemble_thread(rows)
            except DataIntegrityError:
                logfire.error("Topic has no body post", topic_id=topic_id)
                raise

            return TopicDetail(topic=topic, top=top, replies=threads)

    async def create_topic(
        self,
        group_id: GroupId,
        creator_id: UserId,
        title: str,
        content: str,
        display: TopicDisplay = TopicDisplay.NORMAL,
        now: int | None = None,
    ) -> Topic:
        """Create a topic together with its body post.

        Args:
            group_id: Group the topic is posted in
            creator_id: Author
            title: Topic title
            content: Body text
            display: Initial display state
            now: Creation time (defaults to the wall clock)

        Returns:
            The saved topic
        """
        if now is None:
            now = int(time.time())

        with logfire.span(
            "topic_service.create_topic",
            group_id=group_id,
            creator_id=creator_id,
            display=display.name,
        ):
            async with self.unit_of_work.transaction():
                topic = await self.topic_repository.save(
                    Topic(
                        group_id=group_id,
                        creator_id=creator_id,
                        title=title,
                        created_at=now,
                        updated_at=now,
                        dateline=now,
                        display=display,
                    )
                )
                await self.reply_repository.save(
                    Reply(
                        topic_id=topic.id,
                        creator_id=creator_id,
                        content=content,
                        created_at=now,
                    )
                )

            logfire.info("Topic created", topic_id=topic.id, group_id=group_id)
            return topic

    async def create_reply(
        self,
        topic_id: TopicId,
        creator_id: UserId,
        content: str,
        related: ReplyId = ReplyId(0),
        now: int | None = None,
    ) -> Reply:
        """Append a reply to a topic and update the topic's counters.

        Runs as one transaction holding the topic row lock: the reply row,
        the incremented reply counter, ``updated_at`` and (unless the topic
        is silenced) the new ordering score are written together or not at
        all.

        Args:
            topic_id: Topic being replied to
            creator_id: Author
            content: Reply text
            related: Top-level reply to nest under, 0 for a top-level reply
            now: Reply time (defaults to the wall clock)

        Returns:
            The saved reply

        Raises:
            NotFoundError: If the topic does not exist
            NotAllowedError: If the topic has been closed
        """
        if now is None:
            now = int(time.time())

        with logfire.span(
            "topic_service.create_reply",
            topic_id=topic_id,
            creator_id=creator_id,
            related=related,
        ):
            async with self.unit_of_work.transaction():
                topic = await self.topic_repository.find_by_id(topic_id, for_update=True)
                if topic is None:
                    raise NotFoundError("topic", topic_id)
                if topic.state == ReplyState.ADMIN_CLOSE_TOPIC:
                    raise NotAllowedError("reply to a closed topic")

                reply = await self.reply_repository.save(
                    Reply(
                        topic_id=topic_id,
                        creator_id=creator_id,
                        content=content,
                        created_at=now,
                        related=related,
                    )
                )

                dateline = None
                if topic.state != ReplyState.ADMIN_SILENT_TOPIC:
                    dateline = compute_ordering_score(now, topic)
                await self.topic_repository.record_reply(topic_id, now, dateline)

            logfire.info(
                "Reply created",
                topic_id=topic_id,
                reply_id=reply.id,
                dateline=dateline,
            )
            return reply
