"""In-memory reply repository for testing."""

from typing import List, Optional

from forum.domain.model import Reply
from forum.domain.repository import ReplyRepository
from forum.domain.value import ReplyId, TopicId

from .database import InMemoryDatabase


class InMemoryReplyRepository(ReplyRepository):
    """In-memory implementation of ReplyRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        return self.db.replies.get(reply_id)

    async def find_by_topic(self, topic_id: TopicId) -> List[Reply]:
        """Find all rows of a topic in ID order."""
        replies = [r for r in self.db.replies.values() if r.topic_id == topic_id]
        replies.sort(key=lambda r: r.id)
        return replies

    async def save(self, reply: Reply) -> Reply:
        """Save a reply, assigning the next ID to new ones."""
        if not reply.id:
            reply = reply.model_copy(
                update={"id": ReplyId(max(self.db.replies, default=0) + 1)}
            )
        self.db.replies[reply.id] = reply
        return reply
