"""Notification sink adapters."""

from .sink import InMemoryNotificationSink, PostgresNotificationSink

__all__ = ["InMemoryNotificationSink", "PostgresNotificationSink"]
