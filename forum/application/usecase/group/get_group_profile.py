"""Get group profile use case."""

from pydantic import BaseModel

from forum.config import Settings
from forum.domain.error import NotFoundError
from forum.domain.service import GroupService, TopicService, UserService, rule
from forum.domain.value import Auth, TopicType

from forum.application.usecase.view import (
    GroupView,
    MemberView,
    TopicView,
    group_view,
    member_view,
    require_user,
    topic_view,
)


class GetGroupProfileRequest(BaseModel):
    """Get group profile request."""

    name: str
    auth: Auth
    limit: int | None = None  # defaults to the profile page size
    offset: int = 0


class GetGroupProfileResponse(BaseModel):
    """Group home page."""

    group: GroupView
    total_topics: int
    in_group: bool
    topics: list[TopicView]
    recent_added_members: list[MemberView]


class GetGroupProfileUseCase:
    """Use case for rendering a group's home page."""

    def __init__(
        self,
        group_service: GroupService,
        topic_service: TopicService,
        user_service: UserService,
        settings: Settings,
    ) -> None:
        """Initialize get group profile use case.

        Args:
            group_service: Group domain service
            topic_service: Topic domain service
            user_service: User domain service
            settings: Application settings
        """
        self.group_service = group_service
        self.topic_service = topic_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: GetGroupProfileRequest) -> GetGroupProfileResponse:
        """Execute get group profile flow.

        Args:
            request: Group name, viewer and topic page

        Returns:
            Group, first page of visible topics, membership flag and the
            members who joined most recently

        Raises:
            NotFoundError: If the group does not exist
            DataIntegrityError: If a topic creator or member is missing
        """
        group = await self.group_service.get_group_by_name(request.name)
        if not group:
            raise NotFoundError("group", request.name)

        limit = request.limit or self.settings.forum.profile_topic_limit
        total, topics = await self.topic_service.list_topics(
            TopicType.GROUP,
            group.id,
            rule.list_topic_displays(request.auth),
            limit=limit,
            offset=request.offset,
        )
        members = await self.group_service.recent_members(group.id)

        users = await self.user_service.fetch_users(
            [t.creator_id for t in topics] + [m.user_id for m in members]
        )
        media = self.settings.media

        return GetGroupProfileResponse(
            group=group_view(group, media),
            total_topics=total,
            in_group=await self.group_service.is_member(group.id, request.auth.user_id),
            topics=[
                topic_view(t, require_user(users, t.creator_id), media) for t in topics
            ],
            recent_added_members=[
                member_view(m, require_user(users, m.user_id), media) for m in members
            ],
        )
