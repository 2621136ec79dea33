"""Domain model entities for the forum."""

from forum.domain.model.group import Group, GroupMember
from forum.domain.model.notification import Notification
from forum.domain.model.reply import Reply, ThreadReply, TopicDetail
from forum.domain.model.subject import Subject
from forum.domain.model.topic import Topic
from forum.domain.model.user import AccessToken, User, UserGroup

__all__ = [
    "AccessToken",
    "Group",
    "GroupMember",
    "Notification",
    "Reply",
    "Subject",
    "ThreadReply",
    "Topic",
    "TopicDetail",
    "User",
    "UserGroup",
]
