"""In-memory subject repository for testing."""

from typing import Optional

from forum.domain.model import Subject
from forum.domain.repository import SubjectRepository
from forum.domain.value import SubjectId

from .database import InMemoryDatabase


class InMemorySubjectRepository(SubjectRepository):
    """In-memory implementation of SubjectRepository for testing."""

    def __init__(self, db: InMemoryDatabase) -> None:
        self.db = db

    async def find_by_id(self, subject_id: SubjectId) -> Optional[Subject]:
        return self.db.subjects.get(subject_id)

    async def save(self, subject: Subject) -> Subject:
        self.db.subjects[subject.id] = subject
        return subject
