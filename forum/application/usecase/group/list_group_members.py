"""List group members use case."""

from pydantic import BaseModel, Field

from forum.config import Settings
from forum.domain.error import NotFoundError
from forum.domain.service import GroupService, UserService
from forum.domain.value import MemberRole

from forum.application.usecase.view import MemberView, member_view, require_user


class ListGroupMembersRequest(BaseModel):
    """List group members request."""

    name: str
    role: MemberRole = MemberRole.ALL
    limit: int = Field(default=30, ge=1)
    offset: int = Field(default=0, ge=0)


class ListGroupMembersResponse(BaseModel):
    """Page of group members."""

    total: int
    data: list[MemberView]


class ListGroupMembersUseCase:
    """Use case for paging through a group's members."""

    def __init__(
        self, group_service: GroupService, user_service: UserService, settings: Settings
    ) -> None:
        self.group_service = group_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: ListGroupMembersRequest) -> ListGroupMembersResponse:
        """Execute list group members flow.

        Raises:
            NotFoundError: If the group does not exist
        """
        group = await self.group_service.get_group_by_name(request.name)
        if not group:
            raise NotFoundError("group", request.name)

        total, members = await self.group_service.list_members(
            group.id, request.role, limit=request.limit, offset=request.offset
        )
        users = await self.user_service.fetch_users([m.user_id for m in members])

        return ListGroupMembersResponse(
            total=total,
            data=[
                member_view(m, require_user(users, m.user_id), self.settings.media)
                for m in members
            ],
        )
