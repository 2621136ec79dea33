"""In-memory topic repository for testing."""

from typing import List, Optional, Sequence

from forum.domain.model import Topic
from forum.domain.repository import TopicRepository
from forum.domain.value import GroupId, TopicDisplay, TopicId

from .database import InMemoryDatabase


class InMemoryTopicRepository(TopicRepository):
    """In-memory implementation of TopicRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def find_by_id(
        self, topic_id: TopicId, for_update: bool = False
    ) -> Optional[Topic]:
        """Find a topic by ID. There is nothing to lock in memory."""
        return self.db.topics.get(topic_id)

    def _matching(
        self, group_id: GroupId, displays: Sequence[TopicDisplay]
    ) -> list[Topic]:
        return [
            t
            for t in self.db.topics.values()
            if t.group_id == group_id and t.display in displays
        ]

    async def find_by_group(
        self,
        group_id: GroupId,
        displays: Sequence[TopicDisplay],
        limit: int = 30,
        offset: int = 0,
    ) -> List[Topic]:
        """Find topics of a group ordered by ordering score, then ID."""
        topics = self._matching(group_id, displays)
        topics.sort(key=lambda t: (t.dateline, t.id), reverse=True)
        return topics[offset : offset + limit]

    async def count_by_group(
        self, group_id: GroupId, displays: Sequence[TopicDisplay]
    ) -> int:
        """Count topics of a group."""
        return len(self._matching(group_id, displays))

    async def save(self, topic: Topic) -> Topic:
        """Save a topic, assigning the next ID to new ones."""
        if not topic.id:
            topic = topic.model_copy(
                update={"id": TopicId(max(self.db.topics, default=0) + 1)}
            )
        self.db.topics[topic.id] = topic
        return topic

    async def record_reply(
        self, topic_id: TopicId, updated_at: int, dateline: Optional[int]
    ) -> None:
        """Increment the reply counter and bump timestamps."""
        topic = self.db.topics[topic_id]
        update = {"replies": topic.replies + 1, "updated_at": updated_at}
        if dateline is not None:
            update["dateline"] = dateline
        self.db.topics[topic_id] = topic.model_copy(update=update)
