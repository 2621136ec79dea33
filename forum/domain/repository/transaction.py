"""Unit of work interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class UnitOfWork(ABC):
    """Groups repository writes into one atomic transaction.

    Usage:
        async with unit_of_work.transaction():
            await reply_repository.save(reply)
            await topic_repository.record_reply(topic.id, now, dateline)

    Every write made through the request's repositories inside the block
    commits together when it exits normally. Any exception raised inside
    the block rolls all of them back and propagates.
    """

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open an atomic transaction scope."""
        pass
