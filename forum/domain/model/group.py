"""Group entities."""

from pydantic import Field

from forum.domain.model.common import DomainModel
from forum.domain.value import GroupId, UserId


class Group(DomainModel):
    """Discussion group.

    Private groups (``accessible=False``) only accept topics and replies
    from their members.
    """

    id: GroupId
    name: str = Field(min_length=1)
    title: str
    description: str = ""
    nsfw: bool = False
    accessible: bool = True
    member_count: int = Field(default=0, ge=0)
    created_at: int = 0
    icon: str = ""


class GroupMember(DomainModel):
    """Membership of a user in a group."""

    group_id: GroupId
    user_id: UserId
    moderator: bool = False
    joined_at: int = 0
