"""Test configuration and fixtures."""

from forum.domain.model import (
    AccessToken,
    Group,
    GroupMember,
    Reply,
    Topic,
    User,
    UserGroup,
)
from forum.domain.value import (
    Auth,
    GroupId,
    Permission,
    ReplyId,
    ReplyState,
    TopicDisplay,
    TopicId,
    UserGroupId,
    UserId,
)
from forum.persistence.repository.inmemory import InMemoryDatabase

NOW = 1_700_000_000
DAY = 24 * 60 * 60

# Role whose permission bag grants moderation
MODERATOR_ROLE = UserGroupId(2)
MODERATOR_PERMISSION = 'a:1:{s:18:"manage_topic_state";s:1:"1";}'


def make_user(
    user_id: int,
    registered_at: int = NOW - 365 * DAY,
    group_id: int = 10,
) -> User:
    """Build a user registered a year before ``NOW`` by default."""
    return User(
        id=UserId(user_id),
        username=f"user{user_id}",
        nickname=f"User {user_id}",
        group_id=UserGroupId(group_id),
        registered_at=registered_at,
    )


def make_group(
    group_id: int, name: str, accessible: bool = True, nsfw: bool = False
) -> Group:
    """Build a group."""
    return Group(
        id=GroupId(group_id),
        name=name,
        title=name.title(),
        accessible=accessible,
        nsfw=nsfw,
        created_at=NOW - 100 * DAY,
    )


def make_topic(
    topic_id: int,
    group_id: int,
    creator_id: int,
    replies: int = 0,
    state: ReplyState = ReplyState.NORMAL,
    display: TopicDisplay = TopicDisplay.NORMAL,
    created_at: int = NOW - DAY,
) -> Topic:
    """Build a topic whose ordering score is its creation time."""
    return Topic(
        id=TopicId(topic_id),
        group_id=GroupId(group_id),
        creator_id=UserId(creator_id),
        title=f"Topic {topic_id}",
        created_at=created_at,
        updated_at=created_at,
        dateline=created_at,
        replies=replies,
        state=state,
        display=display,
    )


def make_reply(
    reply_id: int,
    topic_id: int,
    creator_id: int,
    related: int = 0,
    state: ReplyState = ReplyState.NORMAL,
) -> Reply:
    """Build a reply row."""
    return Reply(
        id=ReplyId(reply_id),
        topic_id=TopicId(topic_id),
        creator_id=UserId(creator_id),
        content=f"reply {reply_id}",
        created_at=NOW - DAY + reply_id,
        state=state,
        related=ReplyId(related),
    )


def login(user_id: int, **flags: bool) -> Auth:
    """Auth of a logged-in user holding the given permission flags."""
    return Auth(
        login=True,
        allow_nsfw=True,
        user_id=UserId(user_id),
        permission=Permission(**flags),
    )


def seed_users(db: InMemoryDatabase, *user_ids: int) -> None:
    """Store plain users."""
    for user_id in user_ids:
        db.users[UserId(user_id)] = make_user(user_id)


def seed_token(db: InMemoryDatabase, token: str, user_id: int, expires_at: int) -> None:
    """Store an access token."""
    db.access_tokens[token] = AccessToken(
        token=token, user_id=UserId(user_id), expires_at=expires_at
    )


def seed_moderator_role(db: InMemoryDatabase) -> None:
    """Store the moderator role."""
    db.user_groups[MODERATOR_ROLE] = UserGroup(
        id=MODERATOR_ROLE, name="moderator", permission=MODERATOR_PERMISSION
    )


def seed_group(db: InMemoryDatabase, group: Group, *member_ids: int) -> Group:
    """Store a group with its members."""
    db.groups[group.id] = group
    for i, user_id in enumerate(member_ids):
        member = GroupMember(
            group_id=group.id, user_id=UserId(user_id), joined_at=group.created_at + i
        )
        db.group_members[(group.id, member.user_id)] = member
    return group


def seed_topic(db: InMemoryDatabase, topic: Topic, *replies: Reply) -> Topic:
    """Store a topic, its body post and the given replies.

    The body post takes the ID ``topic.id * 100``; replies must use higher
    IDs so the body stays the first row of the topic.
    """
    db.topics[topic.id] = topic
    body = Reply(
        id=ReplyId(topic.id * 100),
        topic_id=topic.id,
        creator_id=topic.creator_id,
        content=f"body of {topic.title}",
        created_at=topic.created_at,
    )
    db.replies[body.id] = body
    for reply in replies:
        db.replies[reply.id] = reply
    return topic
