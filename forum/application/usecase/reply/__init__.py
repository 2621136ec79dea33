"""Reply use cases."""

from .create_reply import CreateReplyRequest, CreateReplyUseCase

__all__ = [
    "CreateReplyRequest",
    "CreateReplyUseCase",
]
