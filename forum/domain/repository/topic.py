"""Topic repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from forum.domain.model.topic import Topic
from forum.domain.value import GroupId, TopicDisplay, TopicId


class TopicRepository(ABC):
    """Repository for Topic aggregate.

    Defines the contract for topic persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, topic_id: TopicId, for_update: bool = False
    ) -> Optional[Topic]:
        """Find a topic by ID.

        Args:
            topic_id: The topic's unique identifier
            for_update: Lock the row until the surrounding transaction ends

        Returns:
            The topic if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_group(
        self,
        group_id: GroupId,
        displays: Sequence[TopicDisplay],
        limit: int = 30,
        offset: int = 0,
    ) -> List[Topic]:
        """Find topics of a group, most recently active first.

        Ordered by ``dateline`` descending, ties broken by ID descending.

        Args:
            group_id: Group ID
            displays: Only topics whose display is in this list
            limit: Maximum number of topics to return
            offset: Number of topics to skip

        Returns:
            List of topics
        """
        pass

    @abstractmethod
    async def count_by_group(
        self, group_id: GroupId, displays: Sequence[TopicDisplay]
    ) -> int:
        """Count topics of a group with the same filter as ``find_by_group``."""
        pass

    @abstractmethod
    async def save(self, topic: Topic) -> Topic:
        """Save a topic (create or update).

        Args:
            topic: Topic to save; ``id == 0`` inserts a new row

        Returns:
            Saved topic with its assigned ID
        """
        pass

    @abstractmethod
    async def record_reply(
        self, topic_id: TopicId, updated_at: int, dateline: Optional[int]
    ) -> None:
        """Account for a new reply on a topic.

        Increments the reply counter atomically and sets ``updated_at``.
        ``dateline`` is left untouched when None.

        Args:
            topic_id: Topic that received the reply
            updated_at: Time of the reply
            dateline: New ordering score, or None to keep the current one
        """
        pass
