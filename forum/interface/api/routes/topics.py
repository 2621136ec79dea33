"""Topic and reply routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel, ConfigDict, Field

from forum.application.usecase.auth import ResolveAuthUseCase
from forum.application.usecase.reply import CreateReplyRequest, CreateReplyUseCase
from forum.application.usecase.topic import (
    GetTopicDetailRequest,
    GetTopicDetailResponse,
    GetTopicDetailUseCase,
)
from forum.application.usecase.view import BasicReplyView
from forum.interface.api.auth import current_auth

router = APIRouter(prefix="/groups/-/topics", tags=["topics"], route_class=DishkaRoute)


@router.get("/{topic_id}", response_model=GetTopicDetailResponse)
async def get_topic_detail(
    topic_id: int,
    request: Request,
    use_case: FromDishka[GetTopicDetailUseCase],
    resolve_auth: FromDishka[ResolveAuthUseCase],
) -> GetTopicDetailResponse:
    """Get a topic with its visible replies.

    Args:
        topic_id: Topic ID
        request: Incoming request (for credentials)
        use_case: Get topic detail use case from DI
        resolve_auth: Resolve auth use case from DI

    Returns:
        Topic detail
    """
    auth = await current_auth(request, resolve_auth)
    return await use_case.execute(GetTopicDetailRequest(topic_id=topic_id, auth=auth))


class CreateReplyAPIRequest(BaseModel):
    """API request for replying to a topic or a reply."""

    model_config = ConfigDict(populate_by_name=True)

    content: str = Field(min_length=1)
    reply_to: int = Field(default=0, ge=0, alias="replyTo")  # 0 replies to the topic


@router.post("/{topic_id}/replies", response_model=BasicReplyView)
async def create_reply(
    topic_id: int,
    body: CreateReplyAPIRequest,
    request: Request,
    use_case: FromDishka[CreateReplyUseCase],
    resolve_auth: FromDishka[ResolveAuthUseCase],
) -> BasicReplyView:
    """Reply to a topic, or to a reply when ``replyTo`` is set.

    Requires login.
    """
    auth = await current_auth(request, resolve_auth)
    return await use_case.execute(
        CreateReplyRequest(
            topic_id=topic_id,
            content=body.content,
            reply_to=body.reply_to,
            auth=auth,
        )
    )
