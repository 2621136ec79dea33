"""PostgreSQL unit of work."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.repository import UnitOfWork


class PostgresUnitOfWork(UnitOfWork):
    """Runs a block of repository writes in one database transaction.

    Shares the request session with the repositories. The block runs inside
    a SAVEPOINT that is rolled back on error; on success the session is
    committed so later side effects observe the written rows.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        with logfire.span("unit_of_work.transaction"):
            async with self.session.begin_nested():
                yield
            await self.session.commit()
