"""Subject routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Path, Query, Request

from forum.application.usecase.auth import ResolveAuthUseCase
from forum.application.usecase.topic import (
    ListGroupTopicsResponse,
    ListSubjectTopicsRequest,
    ListSubjectTopicsUseCase,
)
from forum.interface.api.auth import current_auth

router = APIRouter(prefix="/subjects", tags=["subjects"], route_class=DishkaRoute)


@router.get("/{subject_id}/topics", response_model=ListGroupTopicsResponse)
async def list_subject_topics(
    request: Request,
    use_case: FromDishka[ListSubjectTopicsUseCase],
    resolve_auth: FromDishka[ResolveAuthUseCase],
    subject_id: int = Path(gt=0),
    limit: int = Query(default=30, ge=1),
    offset: int = Query(default=0, ge=0),
) -> ListGroupTopicsResponse:
    """List discussion topics of a subject."""
    auth = await current_auth(request, resolve_auth)
    return await use_case.execute(
        ListSubjectTopicsRequest(
            subject_id=subject_id, auth=auth, limit=limit, offset=offset
        )
    )
