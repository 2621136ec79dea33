"""Topic use cases."""

from .create_topic import CreateTopicRequest, CreateTopicResponse, CreateTopicUseCase
from .get_topic_detail import (
    GetTopicDetailRequest,
    GetTopicDetailResponse,
    GetTopicDetailUseCase,
)
from .list_group_topics import (
    ListGroupTopicsRequest,
    ListGroupTopicsResponse,
    ListGroupTopicsUseCase,
)
from .list_subject_topics import ListSubjectTopicsRequest, ListSubjectTopicsUseCase

__all__ = [
    "CreateTopicRequest",
    "CreateTopicResponse",
    "CreateTopicUseCase",
    "GetTopicDetailRequest",
    "GetTopicDetailResponse",
    "GetTopicDetailUseCase",
    "ListGroupTopicsRequest",
    "ListGroupTopicsResponse",
    "ListGroupTopicsUseCase",
    "ListSubjectTopicsRequest",
    "ListSubjectTopicsUseCase",
]
