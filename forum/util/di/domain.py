"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AuthSettings, ForumSettings
from forum.domain.repository import (
    AccessTokenRepository,
    FriendRepository,
    GroupMemberRepository,
    GroupRepository,
    NotificationSink,
    ReplyRepository,
    TopicRepository,
    UnitOfWork,
    UserGroupRepository,
    UserRepository,
)
from forum.domain.service import (
    AuthService,
    GroupService,
    NotificationService,
    PermissionDecoder,
    TopicService,
    UserService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self,
        token_repository: AccessTokenRepository,
        user_repository: UserRepository,
        user_group_repository: UserGroupRepository,
        permission_decoder: PermissionDecoder,
        auth_settings: AuthSettings,
    ) -> AuthService:
        """Provide the auth context resolver."""
        return AuthService(
            token_repository=token_repository,
            user_repository=user_repository,
            user_group_repository=user_group_repository,
            permission_decoder=permission_decoder,
            nsfw_min_account_age_days=auth_settings.nsfw_min_account_age_days,
        )

    @provide
    def get_user_service(
        self, user_repository: UserRepository, friend_repository: FriendRepository
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, friend_repository=friend_repository
        )

    @provide
    def get_group_service(
        self,
        group_repository: GroupRepository,
        member_repository: GroupMemberRepository,
        forum_settings: ForumSettings,
    ) -> GroupService:
        """Provide group domain service."""
        return GroupService(
            group_repository=group_repository,
            member_repository=member_repository,
            recent_member_limit=forum_settings.recent_member_limit,
        )

    @provide
    def get_topic_service(
        self,
        topic_repository: TopicRepository,
        reply_repository: ReplyRepository,
        unit_of_work: UnitOfWork,
    ) -> TopicService:
        """Provide topic domain service."""
        return TopicService(
            topic_repository=topic_repository,
            reply_repository=reply_repository,
            unit_of_work=unit_of_work,
        )

    @provide
    def get_notification_service(self, sink: NotificationSink) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(sink=sink)
