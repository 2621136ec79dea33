"""Get topic detail use case."""

from pydantic import BaseModel

from forum.config import Settings
from forum.domain.error import DataIntegrityError, NotFoundError
from forum.domain.service import GroupService, TopicService, UserService, rule
from forum.domain.value import Auth, TopicId, TopicType

from forum.application.usecase.view import (
    GroupView,
    ReplyView,
    SubReplyView,
    UserView,
    group_view,
    require_user,
    user_view,
)


class GetTopicDetailRequest(BaseModel):
    """Get topic detail request."""

    topic_id: int
    auth: Auth


class GetTopicDetailResponse(BaseModel):
    """Topic with its group, body and visible replies."""

    id: int
    group: GroupView
    creator: UserView
    title: str
    text: str
    state: int
    created_at: int
    replies: list[ReplyView]


class GetTopicDetailUseCase:
    """Use case for reading a topic thread."""

    def __init__(
        self,
        topic_service: TopicService,
        group_service: GroupService,
        user_service: UserService,
        settings: Settings,
    ) -> None:
        """Initialize get topic detail use case.

        Args:
            topic_service: Topic domain service
            group_service: Group domain service
            user_service: User domain service
            settings: Application settings
        """
        self.topic_service = topic_service
        self.group_service = group_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: GetTopicDetailRequest) -> GetTopicDetailResponse:
        """Execute get topic detail flow.

        Steps:
        1. Load the topic and its assembled thread
        2. Hide the topic if the viewer may not see its display state
        3. Filter replies by state for the viewer
        4. Batch-load every creator and the viewer's friend set

        Args:
            request: Topic ID and viewer

        Returns:
            Topic detail with visible replies

        Raises:
            NotFoundError: If the topic does not exist or is hidden
            DataIntegrityError: If the group or a creator is missing
        """
        auth = request.auth
        detail = await self.topic_service.get_topic_detail(
            TopicType.GROUP, TopicId(request.topic_id)
        )
        if not detail or not rule.can_view_topic(auth, detail.topic):
            raise NotFoundError("topic", request.topic_id)

        topic = detail.topic
        group = await self.group_service.get_group_by_id(topic.group_id)
        if not group:
            raise DataIntegrityError(f"group {topic.group_id}")

        threads = rule.filter_thread(auth, detail.replies)

        user_ids = [topic.creator_id]
        for thread in threads:
            user_ids.append(thread.reply.creator_id)
            user_ids.extend(r.creator_id for r in thread.replies)
        users = await self.user_service.fetch_users(user_ids)
        friends = await self.user_service.fetch_friends(auth.user_id)
        media = self.settings.media

        def sub_reply(reply) -> SubReplyView:
            return SubReplyView(
                id=reply.id,
                creator=user_view(require_user(users, reply.creator_id), media),
                created_at=reply.created_at,
                text=reply.content,
                state=reply.state,
                is_friend=friends.get(reply.creator_id, False),
            )

        return GetTopicDetailResponse(
            id=topic.id,
            group=group_view(group, media),
            creator=user_view(require_user(users, topic.creator_id), media),
            title=topic.title,
            text=detail.top.content,
            state=topic.state,
            created_at=topic.created_at,
            replies=[
                ReplyView(
                    **sub_reply(thread.reply).model_dump(),
                    replies=[sub_reply(r) for r in thread.replies],
                )
                for thread in threads
            ],
        )
