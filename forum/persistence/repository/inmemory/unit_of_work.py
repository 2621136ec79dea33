"""In-memory unit of work for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from forum.domain.repository import UnitOfWork

from .database import InMemoryDatabase


class InMemoryUnitOfWork(UnitOfWork):
    """Restores the in-memory tables when the transaction block fails."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        snapshot = self.db.snapshot()
        try:
            yield
        except BaseException:
            self.db.restore(snapshot)
            raise
