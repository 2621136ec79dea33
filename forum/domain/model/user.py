"""User, role and credential entities.

Users are administered by the main site; the forum only reads them.
Timestamps are unix seconds, as stored by the legacy schema.
"""

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import UserGroupId, UserId


class User(DomainModel):
    """Registered user."""

    id: UserId
    username: str
    nickname: str
    avatar: str = ""
    group_id: UserGroupId = UserGroupId(10)
    registered_at: int = Field(ge=0)
    sign: str = ""


class UserGroup(DomainModel):
    """User role carrying a serialized permission bag."""

    id: UserGroupId
    name: str = ""
    permission: str = ""  # PHP-serialized array, may be empty


class AccessToken(DomainModel):
    """Session or API access token."""

    token: str
    user_id: UserId
    expires_at: int

    def is_valid_at(self, now: int) -> bool:
        """Whether the token is still usable at ``now``."""
        return self.expires_at >= now
