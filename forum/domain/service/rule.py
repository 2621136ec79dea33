"""Visibility rules for topics and replies.

Pure functions over the request's ``Auth``; nothing here touches storage.
"""

from typing import Optional

from forum.domain.model.reply import Reply, ThreadReply
from forum.domain.model.topic import Topic
from forum.domain.value import Auth, ReplyId, ReplyState, TopicDisplay

# Replies only moderators may see
_MODERATOR_ONLY_STATES = frozenset({ReplyState.USER_DELETE, ReplyState.ADMIN_DELETE})

# Replies that can not be the target of a new reply
_UNREPLIABLE_STATES = frozenset(
    {
        ReplyState.ADMIN_CLOSE_TOPIC,
        ReplyState.ADMIN_REOPEN,
        ReplyState.ADMIN_MERGE,
        ReplyState.ADMIN_SILENT_TOPIC,
        ReplyState.USER_DELETE,
        ReplyState.ADMIN_DELETE,
    }
)


def is_moderator(auth: Auth) -> bool:
    """Whether the viewer may manage topic and reply state."""
    return auth.permission.manage_topic_state


def list_topic_displays(auth: Auth) -> list[TopicDisplay]:
    """Topic display states the viewer may list.

    Args:
        auth: Viewer's auth context

    Returns:
        Allowed display states, used as a filter on topic queries
    """
    if is_moderator(auth):
        return [TopicDisplay.NORMAL, TopicDisplay.REVIEW]
    return [TopicDisplay.NORMAL]


def can_view_topic(auth: Auth, topic: Topic) -> bool:
    """Whether the viewer may open a topic.

    Authors can always open their own topics, including ones held for review.
    """
    if topic.display in list_topic_displays(auth):
        return True
    return auth.login and topic.creator_id == auth.user_id


def filter_reply(auth: Auth, reply: Reply) -> Optional[Reply]:
    """Apply visibility rules to a single reply.

    Args:
        auth: Viewer's auth context
        reply: Reply to check

    Returns:
        The reply if the viewer may see it, None otherwise
    """
    if reply.state in _MODERATOR_ONLY_STATES and not is_moderator(auth):
        return None
    return reply


def can_reply_to(reply: Reply) -> bool:
    """Whether a reply may be the target of a new reply."""
    return reply.state not in _UNREPLIABLE_STATES


def filter_thread(auth: Auth, threads: list[ThreadReply]) -> list[ThreadReply]:
    """Apply visibility rules to an assembled reply thread.

    A hidden top-level reply takes its nested replies with it; nested
    replies under a visible parent are filtered one by one.

    Args:
        auth: Viewer's auth context
        threads: Top-level replies with their nested replies

    Returns:
        Visible part of the thread, order preserved
    """
    visible = []
    for thread in threads:
        if filter_reply(auth, thread.reply) is None:
            continue
        nested = [r for r in thread.replies if filter_reply(auth, r) is not None]
        visible.append(ThreadReply(reply=thread.reply, replies=nested))
    return visible


def reply_targets(auth: Auth, threads: list[ThreadReply]) -> dict[ReplyId, Reply]:
    """Replies the viewer may answer, keyed by ID.

    Nested replies are only candidates when their top-level reply is one.
    """
    targets: dict[ReplyId, Reply] = {}
    for thread in filter_thread(auth, threads):
        if not can_reply_to(thread.reply):
            continue
        targets[thread.reply.id] = thread.reply
        for reply in thread.replies:
            if can_reply_to(reply):
                targets[reply.id] = reply
    return targets
