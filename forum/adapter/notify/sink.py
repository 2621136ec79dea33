"""Notification sinks."""

import logfire
from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from forum.adapter.error import DeliveryError
from forum.domain.model.notification import Notification
from forum.domain.repository import NotificationSink
from forum.persistence.mappers import notification_to_dict
from forum.persistence.tables import notifications_table


class PostgresNotificationSink(NotificationSink):
    """Writes notifications to the ``notifications`` table.

    Uses its own session so a failed insert can never roll back the reply
    it describes, which has already been committed.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize the sink.

        Args:
            session_factory: Factory for short-lived sessions
        """
        self.session_factory = session_factory

    async def send(self, notification: Notification) -> None:
        """Insert a notification row.

        Raises:
            DeliveryError: If the insert fails
        """
        with logfire.span(
            "postgres_notification_sink.send",
            dest_user_id=notification.dest_user_id,
            type=notification.type.name,
        ):
            try:
                async with self.session_factory() as session:
                    await session.execute(
                        insert(notifications_table).values(
                            **notification_to_dict(notification)
                        )
                    )
                    await session.commit()
            except SQLAlchemyError as e:
                raise DeliveryError(f"failed to store notification: {e}") from e


class InMemoryNotificationSink(NotificationSink):
    """Collects notifications in a list."""

    def __init__(self) -> None:
        self.sent: list[Notification] = []

    async def send(self, notification: Notification) -> None:
        self.sent.append(notification)
