"""Notification entity."""

from forum.domain.model.common import DomainModel
from forum.domain.value import NotificationType, ReplyId, TopicId, UserId


class Notification(DomainModel):
    """Event telling a user someone replied to them."""

    dest_user_id: UserId
    source_user_id: UserId
    type: NotificationType
    post_id: ReplyId
    topic_id: TopicId
    title: str
    created_at: int
