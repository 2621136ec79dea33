"""Create topic use case."""

from pydantic import BaseModel, Field

from forum.domain.error import (
    NeedLoginError,
    NotAllowedError,
    NotFoundError,
    NotJoinPrivateGroupError,
)
from forum.domain.service import GroupService, ReviewFilter, TopicService
from forum.domain.value import Auth, TopicDisplay


class CreateTopicRequest(BaseModel):
    """Create topic request."""

    group_name: str = Field(min_length=1)
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    auth: Auth


class CreateTopicResponse(BaseModel):
    """Create topic response."""

    id: int


class CreateTopicUseCase:
    """Use case for posting a new topic in a group."""

    def __init__(
        self,
        group_service: GroupService,
        topic_service: TopicService,
        review_filter: ReviewFilter,
    ) -> None:
        """Initialize create topic use case.

        Args:
            group_service: Group domain service
            topic_service: Topic domain service
            review_filter: Decides whether new content is held for review
        """
        self.group_service = group_service
        self.topic_service = topic_service
        self.review_filter = review_filter

    async def execute(self, request: CreateTopicRequest) -> CreateTopicResponse:
        """Execute create topic flow.

        Steps:
        1. Check the author may post at all
        2. Resolve the group
        3. Hold the topic for review if its title or body is flagged
        4. Check membership of private groups
        5. Create the topic and its body post in one transaction

        Args:
            request: Create topic request

        Returns:
            ID of the new topic

        Raises:
            NeedLoginError: If the request is anonymous
            NotAllowedError: If the author is banned from posting
            NotFoundError: If the group does not exist
            NotJoinPrivateGroupError: If the group is private and the author
                has not joined it
        """
        auth = request.auth
        if not auth.login:
            raise NeedLoginError("creating a post")
        if auth.permission.ban_post:
            raise NotAllowedError("create posts")

        group = await self.group_service.get_group_by_name(request.group_name)
        if not group:
            raise NotFoundError("group", request.group_name)

        display = TopicDisplay.NORMAL
        if self.review_filter.needs_review(
            request.title
        ) or self.review_filter.needs_review(request.content):
            display = TopicDisplay.REVIEW

        if not group.accessible and not await self.group_service.is_member(
            group.id, auth.user_id
        ):
            raise NotJoinPrivateGroupError(group.name)

        topic = await self.topic_service.create_topic(
            group_id=group.id,
            creator_id=auth.user_id,
            title=request.title,
            content=request.content,
            display=display,
        )
        return CreateTopicResponse(id=topic.id)
