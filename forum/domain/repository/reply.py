"""Reply repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from forum.domain.model.reply import Reply
from forum.domain.value import ReplyId, TopicId


class ReplyRepository(ABC):
    """Repository for replies (group posts)."""

    @abstractmethod
    async def find_by_id(self, reply_id: ReplyId) -> Optional[Reply]:
        """Find a reply by ID."""
        pass

    @abstractmethod
    async def find_by_topic(self, topic_id: TopicId) -> List[Reply]:
        """Find every reply row of a topic, body included.

        Args:
            topic_id: Topic ID

        Returns:
            Replies ordered by ID ascending; the first one is the topic body
        """
        pass

    @abstractmethod
    async def save(self, reply: Reply) -> Reply:
        """Save a reply.

        Args:
            reply: Reply to save; ``id == 0`` inserts a new row

        Returns:
            Saved reply with its assigned ID
        """
        pass
