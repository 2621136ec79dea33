"""Reply entity and the assembled thread views.

Replies nest at most two levels deep: a reply either answers the topic
(``related == 0``) or sits under a top-level reply (``related`` is that
reply's id). The stored column stays flat; ``placement`` exposes it as a
tagged value.
"""

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.model.topic import Topic
from forum.domain.value import (
    Nested,
    Placement,
    ReplyId,
    ReplyState,
    TopicId,
    TopLevel,
    UserId,
)


class Reply(DomainModel):
    """Reply row (stored as a group post)."""

    id: ReplyId = ReplyId(0)  # 0 until persisted
    topic_id: TopicId
    creator_id: UserId
    content: str
    created_at: int
    state: ReplyState = ReplyState.NORMAL
    related: ReplyId = Field(default=ReplyId(0), ge=0)

    @property
    def placement(self) -> Placement:
        """Where this reply sits in the thread."""
        if self.related == 0:
            return TopLevel()
        return Nested(parent_id=self.related)

    @property
    def thread_root_id(self) -> ReplyId:
        """Id of the top-level reply this reply belongs to (itself if top-level)."""
        return self.related or self.id


class ThreadReply(DomainModel):
    """Top-level reply together with the replies nested under it."""

    reply: Reply
    replies: list[Reply] = []


class TopicDetail(DomainModel):
    """Topic with its body post and reply thread."""

    topic: Topic
    top: Reply
    replies: list[ThreadReply] = []
