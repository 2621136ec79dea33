"""Domain value objects for the forum.

Enum values are the integers stored by the legacy schema and must not be
renumbered.
"""

from enum import Enum, IntEnum

from pydantic import ConfigDict

from forum.domain.value.common import ValueObject
from forum.domain.value.identifiers import ReplyId, UserId


class TopicType(str, Enum):
    """Scope a topic belongs to."""

    GROUP = "group"
    SUBJECT = "subject"


class ReplyState(IntEnum):
    """Administrative state of a topic or a single reply."""

    NORMAL = 0
    ADMIN_CLOSE_TOPIC = 1
    ADMIN_REOPEN = 2
    ADMIN_PIN = 3
    ADMIN_MERGE = 4
    ADMIN_SILENT_TOPIC = 5  # sunk: new replies never bump the topic
    USER_DELETE = 6
    ADMIN_DELETE = 7


class TopicDisplay(IntEnum):
    """Moderation visibility of a topic in listings."""

    BAN = 0
    NORMAL = 1
    REVIEW = 2


class MemberRole(str, Enum):
    """Filter applied to a group member listing."""

    MOD = "mod"
    NORMAL = "normal"
    ALL = "all"


class NotificationType(IntEnum):
    """Kind of notification sent after a reply."""

    GROUP_TOPIC_REPLY = 1
    GROUP_POST_REPLY = 2


class Permission(ValueObject):
    """Named permission flags granted to a user group.

    Missing flags are False. Unknown keys in the stored bag are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    app_erase: bool = False
    ban_post: bool = False
    ban_visit: bool = False
    doujin_subject_erase: bool = False
    doujin_subject_lock: bool = False
    ep_edit: bool = False
    ep_erase: bool = False
    ep_lock: bool = False
    ep_merge: bool = False
    ep_move: bool = False
    manage_app: bool = False
    manage_report: bool = False
    manage_topic_state: bool = False
    manage_user: bool = False
    manage_user_group: bool = False
    manage_user_photo: bool = False
    mono_edit: bool = False
    mono_erase: bool = False
    mono_lock: bool = False
    mono_merge: bool = False
    report: bool = False
    subject_cover_erase: bool = False
    subject_cover_lock: bool = False
    subject_edit: bool = False
    subject_erase: bool = False
    subject_lock: bool = False
    subject_merge: bool = False
    subject_refresh: bool = False
    subject_related: bool = False
    user_ban: bool = False
    user_group: bool = False
    user_list: bool = False
    user_wiki_apply: bool = False
    user_wiki_approve: bool = False

    @classmethod
    def field_names(cls) -> frozenset[str]:
        """All known permission flag names."""
        return frozenset(cls.model_fields)


class Auth(ValueObject):
    """Authorization facts for one request.

    Recomputed for every request and never persisted.
    """

    login: bool = False
    allow_nsfw: bool = False
    user_id: UserId = UserId(0)
    permission: Permission = Permission()

    @classmethod
    def anonymous(cls) -> "Auth":
        """Auth context of a request without a usable credential."""
        return cls()


class TopLevel(ValueObject):
    """Placement of a reply answering the topic directly."""


class Nested(ValueObject):
    """Placement of a reply nested under a top-level reply."""

    parent_id: ReplyId


Placement = TopLevel | Nested
