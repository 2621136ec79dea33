"""Notification infrastructure providers."""

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from forum.adapter.notify import PostgresNotificationSink
from forum.domain.repository import NotificationSink
from forum.util.di.base import ProviderBase


class NotificationProvider(ProviderBase):
    """Notification component base."""

    __mock_component__ = "notify"
    __depends_on__ = {"persistence"}


class ProdNotificationProvider(NotificationProvider):
    """Production notification provider writing to PostgreSQL."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_notification_sink(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> NotificationSink:
        """Provide the notification sink.

        It opens its own sessions so delivery happens outside the request
        transaction.
        """
        return PostgresNotificationSink(session_factory)
