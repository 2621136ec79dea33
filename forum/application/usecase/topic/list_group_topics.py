"""List group topics use case."""

from pydantic import BaseModel, Field

from forum.config import Settings
from forum.domain.error import NotFoundError, NotJoinPrivateGroupError
from forum.domain.service import GroupService, TopicService, UserService, rule
from forum.domain.value import Auth, TopicType

from forum.application.usecase.view import TopicView, require_user, topic_view


class ListGroupTopicsRequest(BaseModel):
    """List group topics request."""

    name: str
    auth: Auth
    limit: int = Field(default=30, ge=1)
    offset: int = Field(default=0, ge=0)


class ListGroupTopicsResponse(BaseModel):
    """Page of topics."""

    total: int
    data: list[TopicView]


class ListGroupTopicsUseCase:
    """Use case for paging through a group's topics."""

    def __init__(
        self,
        group_service: GroupService,
        topic_service: TopicService,
        user_service: UserService,
        settings: Settings,
    ) -> None:
        """Initialize list group topics use case.

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

    async def execute(self, request: ListGroupTopicsRequest) -> ListGroupTopicsResponse:
        """Execute list group topics flow.

        Private groups only list their topics to members.

        Args:
            request: Group name, viewer and page

        Returns:
            Total visible topics and the requested page

        Raises:
            NotFoundError: If the group does not exist
            NotJoinPrivateGroupError: If the group is private and the viewer
                is not a member
        """
        group = await self.group_service.get_group_by_name(request.name)
        if not group:
            raise NotFoundError("group", request.name)

        if not group.accessible and not await self.group_service.is_member(
            group.id, request.auth.user_id
        ):
            raise NotJoinPrivateGroupError(group.name)

        total, topics = await self.topic_service.list_topics(
            TopicType.GROUP,
            group.id,
            rule.list_topic_displays(request.auth),
            limit=request.limit,
            offset=request.offset,
        )
        users = await self.user_service.fetch_users([t.creator_id for t in topics])

        return ListGroupTopicsResponse(
            total=total,
            data=[
                topic_view(t, require_user(users, t.creator_id), self.settings.media)
                for t in topics
            ],
        )
