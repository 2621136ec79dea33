"""List subject topics use case."""

from pydantic import BaseModel, Field

from forum.config import Settings
from forum.domain.error import NotFoundError
from forum.domain.repository import SubjectRepository
from forum.domain.service import TopicService, UserService, rule
from forum.domain.value import Auth, SubjectId, TopicType

from forum.application.usecase.view import require_user, topic_view
from .list_group_topics import ListGroupTopicsResponse


class ListSubjectTopicsRequest(BaseModel):
    """List subject topics request."""

    subject_id: int = Field(gt=0)
    auth: Auth
    limit: int = Field(default=30, ge=1)
    offset: int = Field(default=0, ge=0)


class ListSubjectTopicsUseCase:
    """Use case for listing discussion topics of a subject.

    Subject discussions are not served by the topic service yet; the
    lookup still hides subjects the viewer may not know about.
    """

    def __init__(
        self,
        subject_repository: SubjectRepository,
        topic_service: TopicService,
        user_service: UserService,
        settings: Settings,
    ) -> None:
        self.subject_repository = subject_repository
        self.topic_service = topic_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: ListSubjectTopicsRequest) -> ListGroupTopicsResponse:
        """Execute list subject topics flow.

        Raises:
            NotFoundError: If the subject does not exist, or is NSFW and the
                viewer may not see NSFW content
            UnimplementedError: From the topic service for subject scopes
        """
        subject = await self.subject_repository.find_by_id(SubjectId(request.subject_id))
        if not subject or (subject.nsfw and not request.auth.allow_nsfw):
            raise NotFoundError("subject", request.subject_id)

        total, topics = await self.topic_service.list_topics(
            TopicType.SUBJECT,
            subject.id,
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
