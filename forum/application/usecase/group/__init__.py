"""Group use cases."""

from .get_group_profile import (
    GetGroupProfileRequest,
    GetGroupProfileResponse,
    GetGroupProfileUseCase,
)
from .list_group_members import (
    ListGroupMembersRequest,
    ListGroupMembersResponse,
    ListGroupMembersUseCase,
)

__all__ = [
    "GetGroupProfileRequest",
    "GetGroupProfileResponse",
    "GetGroupProfileUseCase",
    "ListGroupMembersRequest",
    "ListGroupMembersResponse",
    "ListGroupMembersUseCase",
]
