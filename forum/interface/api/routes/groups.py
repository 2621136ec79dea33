"""Group routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, Request
from pydantic import BaseModel, Field

from forum.application.usecase.auth import ResolveAuthUseCase
from forum.application.usecase.group import (
    GetGroupProfileRequest,
    GetGroupProfileResponse,
    GetGroupProfileUseCase,
    ListGroupMembersRequest,
    ListGroupMembersResponse,
    ListGroupMembersUseCase,
)
from forum.application.usecase.topic import (
    CreateTopicRequest,
    CreateTopicResponse,
    CreateTopicUseCase,
    ListGroupTopicsRequest,
    ListGroupTopicsResponse,
    ListGroupTopicsUseCase,
)
from forum.domain.value import MemberRole
from forum.interface.api.auth import current_auth

router = APIRouter(prefix="/groups", tags=["groups"], route_class=DishkaRoute)


@router.get("/{name}/profile", response_model=GetGroupProfileResponse)
async def get_group_profile(
    name: str,
    request: Request,
    use_case: FromDishka[GetGroupProfileUseCase],
    resolve_auth: FromDishka[ResolveAuthUseCase],
    limit: int | None = Query(default=None, ge=1),
    offset: int = Query(default=0, ge=0),
) -> GetGroupProfileResponse:
    """Get a group's home page.

    Args:
        name: Group name
        request: Incoming request (for credentials)
        use_case: Get group profile use case from DI
        resolve_auth: Resolve auth use case from DI
        limit: Topic page size
        offset: Topic page offset

    Returns:
        Group, latest topics, membership flag and newest members
    """
    auth = await current_auth(request, resolve_auth)
    return await use_case.execute(
        GetGroupProfileRequest(name=name, auth=auth, limit=limit, offset=offset)
    )


@router.get("/{name}/members", response_model=ListGroupMembersResponse)
async def list_group_members(
    name: str,
    use_case: FromDishka[ListGroupMembersUseCase],
    type: MemberRole = Query(default=MemberRole.ALL),
    limit: int = Query(default=30, ge=1),
    offset: int = Query(default=0, ge=0),
) -> ListGroupMembersResponse:
    """List members of a group, most recently joined first."""
    return await use_case.execute(
        ListGroupMembersRequest(name=name, role=type, limit=limit, offset=offset)
    )


@router.get("/{name}/topics", response_model=ListGroupTopicsResponse)
async def list_group_topics(
    name: str,
    request: Request,
    use_case: FromDishka[ListGroupTopicsUseCase],
    resolve_auth: FromDishka[ResolveAuthUseCase],
    limit: int = Query(default=30, ge=1),
    offset: int = Query(default=0, ge=0),
) -> ListGroupTopicsResponse:
    """List topics of a group, most recently active first.

    Private groups only list topics to their members.
    """
    auth = await current_auth(request, resolve_auth)
    return await use_case.execute(
        ListGroupTopicsRequest(name=name, auth=auth, limit=limit, offset=offset)
    )


class CreateTopicAPIRequest(BaseModel):
    """API request for creating a topic."""

    title: str = Field(min_length=1)
    content: str = Field(min_length=1)


@router.post("/{name}/topics", response_model=CreateTopicResponse)
async def create_topic(
    name: str,
    body: CreateTopicAPIRequest,
    request: Request,
    use_case: FromDishka[CreateTopicUseCase],
    resolve_auth: FromDishka[ResolveAuthUseCase],
) -> CreateTopicResponse:
    """Create a topic in a group.

    Requires login. Flagged titles or bodies are held for review.

    Args:
        name: Group name
        body: Topic title and body
        request: Incoming request (for credentials)
        use_case: Create topic use case from DI
        resolve_auth: Resolve auth use case from DI

    Returns:
        ID of the new topic
    """
    auth = await current_auth(request, resolve_auth)
    return await use_case.execute(
        CreateTopicRequest(
            group_name=name, title=body.title, content=body.content, auth=auth
        )
    )
