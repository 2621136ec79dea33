"""Topic aggregate root.

A topic is a thread inside a group. Its body is stored as the first reply
row, so a topic always exists together with at least one reply.
"""

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import GroupId, ReplyState, TopicDisplay, TopicId, UserId


class Topic(DomainModel):
    """Forum thread.

    ``dateline`` is the ordering score listings sort on. It starts at the
    creation time and is recomputed whenever a reply lands, unless the
    topic has been silenced. ``replies`` counts replies excluding the body
    and is only ever incremented inside the reply transaction.
    """

    id: TopicId = TopicId(0)  # 0 until persisted
    group_id: GroupId
    creator_id: UserId
    title: str = Field(min_length=1)
    created_at: int
    updated_at: int
    dateline: int
    replies: int = Field(default=0, ge=0)
    state: ReplyState = ReplyState.NORMAL
    display: TopicDisplay = TopicDisplay.NORMAL
