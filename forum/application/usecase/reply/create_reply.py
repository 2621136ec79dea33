"""Create reply use case."""

import time

from pydantic import BaseModel, Field

from forum.config import Settings
from forum.domain.error import (
    DataIntegrityError,
    NeedLoginError,
    NotAllowedError,
    NotFoundError,
    NotJoinPrivateGroupError,
)
from forum.domain.service import (
    GroupService,
    NotificationService,
    TopicService,
    UserService,
    rule,
)
from forum.domain.value import (
    Auth,
    NotificationType,
    ReplyId,
    ReplyState,
    TopicId,
    TopicType,
)

from forum.application.usecase.view import BasicReplyView, basic_reply_view


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    topic_id: int
    content: str = Field(min_length=1)
    reply_to: int = Field(default=0, ge=0)  # 0 replies to the topic itself
    auth: Auth


class CreateReplyUseCase:
    """Use case for replying to a topic or to another reply."""

    def __init__(
        self,
        topic_service: TopicService,
        group_service: GroupService,
        user_service: UserService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> None:
        """Initialize create reply use case.

        Args:
            topic_service: Topic domain service
            group_service: Group domain service
            user_service: User domain service
            notification_service: Notification domain service
            settings: Application settings
        """
        self.topic_service = topic_service
        self.group_service = group_service
        self.user_service = user_service
        self.notification_service = notification_service
        self.settings = settings

    async def execute(self, request: CreateReplyRequest) -> BasicReplyView:
        """Execute create reply flow.

        Steps:
        1. Check the author may post at all
        2. Load the topic thread and refuse closed topics
        3. Resolve the reply target among replies the author can see
        4. Check membership of private groups
        5. Write the reply and topic counters in one transaction
        6. Notify the topic or reply author

        Replies nest at most two levels: answering a nested reply files the
        new one under the same top-level reply.

        Args:
            request: Create reply request

        Returns:
            The new reply

        Raises:
            NeedLoginError: If the request is anonymous
            NotAllowedError: If the author is banned from posting or the
                topic is closed
            NotFoundError: If the topic or the reply target does not exist
            NotJoinPrivateGroupError: If the group is private and the author
                has not joined it
        """
        auth = request.auth
        if not auth.login:
            raise NeedLoginError("creating a reply")
        if auth.permission.ban_post:
            raise NotAllowedError("create reply")

        detail = await self.topic_service.get_topic_detail(
            TopicType.GROUP, TopicId(request.topic_id)
        )
        if not detail:
            raise NotFoundError("topic", request.topic_id)
        topic = detail.topic
        if topic.state == ReplyState.ADMIN_CLOSE_TOPIC:
            raise NotAllowedError("reply to a closed topic")

        related = ReplyId(0)
        dest_user_id = topic.creator_id
        if request.reply_to:
            targets = rule.reply_targets(auth, detail.replies)
            replied = targets.get(ReplyId(request.reply_to))
            if replied is None:
                raise NotFoundError("parent post", request.reply_to)
            dest_user_id = replied.creator_id
            related = replied.thread_root_id

        group = await self.group_service.get_group_by_id(topic.group_id)
        if not group:
            raise DataIntegrityError(f"group {topic.group_id}")
        if not group.accessible and not await self.group_service.is_member(
            group.id, auth.user_id
        ):
            raise NotJoinPrivateGroupError(group.name)

        now = int(time.time())
        reply = await self.topic_service.create_reply(
            topic_id=topic.id,
            creator_id=auth.user_id,
            content=request.content,
            related=related,
            now=now,
        )

        notification_type = (
            NotificationType.GROUP_TOPIC_REPLY
            if request.reply_to == 0
            else NotificationType.GROUP_POST_REPLY
        )
        await self.notification_service.emit(
            notification_type,
            dest_user_id=dest_user_id,
            source_user_id=auth.user_id,
            post_id=reply.id,
            topic_id=topic.id,
            title=topic.title,
            created_at=now,
        )

        creator = await self.user_service.get_user(auth.user_id)
        return basic_reply_view(reply, creator, self.settings.media)
