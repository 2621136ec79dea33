"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.auth import ResolveAuthUseCase
from forum.application.usecase.group import (
    GetGroupProfileUseCase,
    ListGroupMembersUseCase,
)
from forum.application.usecase.reply import CreateReplyUseCase
from forum.application.usecase.topic import (
    CreateTopicUseCase,
    GetTopicDetailUseCase,
    ListGroupTopicsUseCase,
    ListSubjectTopicsUseCase,
)
from forum.config import AuthSettings, Settings
from forum.domain.repository import SubjectRepository
from forum.domain.service import (
    AuthService,
    GroupService,
    NotificationService,
    ReviewFilter,
    TopicService,
    UserService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_resolve_auth_use_case(
        self, auth_service: AuthService, auth_settings: AuthSettings
    ) -> ResolveAuthUseCase:
        """Provide resolve auth use case."""
        return ResolveAuthUseCase(auth_service=auth_service, auth_settings=auth_settings)

    # Group use cases
    @provide(scope=Scope.REQUEST)
    def get_group_profile_use_case(
        self,
        group_service: GroupService,
        topic_service: TopicService,
        user_service: UserService,
        settings: Settings,
    ) -> GetGroupProfileUseCase:
        """Provide get group profile use case."""
        return GetGroupProfileUseCase(
            group_service=group_service,
            topic_service=topic_service,
            user_service=user_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_group_members_use_case(
        self, group_service: GroupService, user_service: UserService, settings: Settings
    ) -> ListGroupMembersUseCase:
        """Provide list group members use case."""
        return ListGroupMembersUseCase(
            group_service=group_service, user_service=user_service, settings=settings
        )

    # Topic use cases
    @provide(scope=Scope.REQUEST)
    def get_list_group_topics_use_case(
        self,
        group_service: GroupService,
        topic_service: TopicService,
        user_service: UserService,
        settings: Settings,
    ) -> ListGroupTopicsUseCase:
        """Provide list group topics use case."""
        return ListGroupTopicsUseCase(
            group_service=group_service,
            topic_service=topic_service,
            user_service=user_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_subject_topics_use_case(
        self,
        subject_repository: SubjectRepository,
        topic_service: TopicService,
        user_service: UserService,
        settings: Settings,
    ) -> ListSubjectTopicsUseCase:
        """Provide list subject topics use case."""
        return ListSubjectTopicsUseCase(
            subject_repository=subject_repository,
            topic_service=topic_service,
            user_service=user_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_topic_detail_use_case(
        self,
        topic_service: TopicService,
        group_service: GroupService,
        user_service: UserService,
        settings: Settings,
    ) -> GetTopicDetailUseCase:
        """Provide get topic detail use case."""
        return GetTopicDetailUseCase(
            topic_service=topic_service,
            group_service=group_service,
            user_service=user_service,
            settings=settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_topic_use_case(
        self,
        group_service: GroupService,
        topic_service: TopicService,
        review_filter: ReviewFilter,
    ) -> CreateTopicUseCase:
        """Provide create topic use case."""
        return CreateTopicUseCase(
            group_service=group_service,
            topic_service=topic_service,
            review_filter=review_filter,
        )

    # Reply use cases
    @provide(scope=Scope.REQUEST)
    def get_create_reply_use_case(
        self,
        topic_service: TopicService,
        group_service: GroupService,
        user_service: UserService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(
            topic_service=topic_service,
            group_service=group_service,
            user_service=user_service,
            notification_service=notification_service,
            settings=settings,
        )
