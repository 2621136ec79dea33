"""Notification sink interface."""

from abc import ABC, abstractmethod

from forum.domain.model.notification import Notification


class NotificationSink(ABC):
    """Destination for notification events.

    Delivery is fire-and-forget from the caller's point of view.
    """

    @abstractmethod
    async def send(self, notification: Notification) -> None:
        """Deliver a notification.

        Args:
            notification: Event to deliver

        Raises:
            Exception: Any delivery failure; callers log and ignore it
        """
        pass
