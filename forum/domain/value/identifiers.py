"""Strongly typed identifiers for forum entities.

Identifiers are the integer primary keys of the legacy schema. ``0`` is
never a stored id: ``UserId(0)`` is the anonymous user and a reply's
``related == 0`` means "replies to the topic itself".
"""

from typing import NewType

UserId = NewType("UserId", int)
UserGroupId = NewType("UserGroupId", int)
GroupId = NewType("GroupId", int)
TopicId = NewType("TopicId", int)
ReplyId = NewType("ReplyId", int)
SubjectId = NewType("SubjectId", int)
NotificationId = NewType("NotificationId", int)
