"""Response models shared by several use cases.

Timestamps are unix seconds, enum states are their stored integers.
"""

from typing import Mapping

from pydantic import BaseModel

from forum.config import MediaSettings
from forum.domain.error import DataIntegrityError
from forum.domain.model import Group, GroupMember, Reply, Topic, User
from forum.domain.value import UserId
from forum.util.media import Avatar, avatar, group_icon


class UserView(BaseModel):
    """Public user card."""

    id: int
    username: str
    nickname: str
    avatar: Avatar
    sign: str
    user_group: int


class GroupView(BaseModel):
    """Group summary."""

    id: int
    name: str
    nsfw: bool
    title: str
    icon: str
    description: str
    total_members: int
    created_at: int


class MemberView(BaseModel):
    """Group member card."""

    id: int
    username: str
    nickname: str
    avatar: Avatar
    joined_at: int


class TopicView(BaseModel):
    """Topic row in a listing."""

    id: int
    parent_id: int
    title: str
    creator: UserView
    created_at: int
    updated_at: int
    replies: int
    state: int
    display: int


class BasicReplyView(BaseModel):
    """Reply without thread context."""

    id: int
    creator: UserView
    created_at: int
    text: str
    state: int


class SubReplyView(BasicReplyView):
    """Nested reply as seen by the viewer."""

    is_friend: bool


class ReplyView(SubReplyView):
    """Top-level reply with its nested replies."""

    replies: list[SubReplyView]


def user_view(user: User, media: MediaSettings) -> UserView:
    """Render a user card."""
    return UserView(
        id=user.id,
        username=user.username,
        nickname=user.nickname,
        avatar=avatar(user.avatar, media),
        sign=user.sign,
        user_group=user.group_id,
    )


def group_view(group: Group, media: MediaSettings) -> GroupView:
    """Render a group summary."""
    return GroupView(
        id=group.id,
        name=group.name,
        nsfw=group.nsfw,
        title=group.title,
        icon=group_icon(group.icon, media),
        description=group.description,
        total_members=group.member_count,
        created_at=group.created_at,
    )


def member_view(member: GroupMember, user: User, media: MediaSettings) -> MemberView:
    """Render a group member card."""
    return MemberView(
        id=user.id,
        username=user.username,
        nickname=user.nickname,
        avatar=avatar(user.avatar, media),
        joined_at=member.joined_at,
    )


def topic_view(topic: Topic, creator: User, media: MediaSettings) -> TopicView:
    """Render a topic listing row."""
    return TopicView(
        id=topic.id,
        parent_id=topic.group_id,
        title=topic.title,
        creator=user_view(creator, media),
        created_at=topic.created_at,
        updated_at=topic.updated_at,
        replies=topic.replies,
        state=topic.state,
        display=topic.display,
    )


def basic_reply_view(reply: Reply, creator: User, media: MediaSettings) -> BasicReplyView:
    """Render a reply without thread context."""
    return BasicReplyView(
        id=reply.id,
        creator=user_view(creator, media),
        created_at=reply.created_at,
        text=reply.content,
        state=reply.state,
    )


def require_user(users: Mapping[UserId, User], user_id: UserId) -> User:
    """Pick a user that must have been loaded.

    Raises:
        DataIntegrityError: If the user is missing
    """
    user = users.get(user_id)
    if user is None:
        raise DataIntegrityError(f"user {user_id}")
    return user
