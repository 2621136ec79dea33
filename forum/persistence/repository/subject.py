"""PostgreSQL implementation of Subject repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.model import Subject
from forum.domain.repository import SubjectRepository
from forum.domain.value import SubjectId
from forum.persistence.mappers import row_to_subject
from forum.persistence.tables import subjects_table


class PostgresSubjectRepository(SubjectRepository):
    """PostgreSQL implementation of SubjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, subject_id: SubjectId) -> Optional[Subject]:
        """Find a subject by ID."""
        stmt = select(subjects_table).where(subjects_table.c.id == subject_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_subject(row._asdict()) if row else None

    async def save(self, subject: Subject) -> Subject:
        """Insert or update a subject."""
        data = subject.model_dump(mode="json")
        stmt = insert(subjects_table).values(**data)
        stmt = stmt.on_conflict_do_update(
            index_elements=[subjects_table.c.id],
            set_={"name": subject.name, "nsfw": subject.nsfw},
        )
        await self.session.execute(stmt)
        return subject
