"""Domain services."""

from .auth_service import AuthService, PermissionDecoder
from .base import Service
from .group_service import GroupService
from .notification_service import NotificationService
from .review import ReviewFilter
from .topic_service import TopicService, assemble_thread
from .user_service import UserService

__all__ = [
    "AuthService",
    "GroupService",
    "NotificationService",
    "PermissionDecoder",
    "ReviewFilter",
    "Service",
    "TopicService",
    "UserService",
    "assemble_thread",
]
