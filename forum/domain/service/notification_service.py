"""Notification domain service."""

import logfire

from forum.domain.model.notification import Notification
from forum.domain.repository import NotificationSink
from forum.domain.value import NotificationType, ReplyId, TopicId, UserId

from .base import Service


class NotificationService(Service):
    """Emits notifications after successful writes.

    Delivery failures never reach the caller: the write they describe has
    already been committed.
    """

    def __init__(self, sink: NotificationSink) -> None:
        """Initialize notification service.

        Args:
            sink: Where notifications are delivered
        """
        self.sink = sink

    async def emit(
        self,
        notification_type: NotificationType,
        dest_user_id: UserId,
        source_user_id: UserId,
        post_id: ReplyId,
        topic_id: TopicId,
        title: str,
        created_at: int,
    ) -> None:
        """Send a notification, logging and dropping any delivery failure.

        Args:
            notification_type: Kind of event
            dest_user_id: Recipient
            source_user_id: User who caused the event
            post_id: Reply the event is about
            topic_id: Topic the reply belongs to
            title: Topic title shown in the notification
            created_at: Event time (unix seconds)
        """
        notification = Notification(
            dest_user_id=dest_user_id,
            source_user_id=source_user_id,
            type=notification_type,
            post_id=post_id,
            topic_id=topic_id,
            title=title,
            created_at=created_at,
        )
        with logfire.span(
            "notification_service.emit",
            type=notification_type.name,
            dest_user_id=dest_user_id,
            post_id=post_id,
        ):
            try:
                await self.sink.send(notification)
            except Exception as e:
                logfire.warn(
                    "Failed to deliver notification",
                    type=notification_type.name,
                    dest_user_id=dest_user_id,
                    post_id=post_id,
                    error=str(e),
                )
                return
            logfire.info("Notification sent", dest_user_id=dest_user_id)
