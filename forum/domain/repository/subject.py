"""Subject repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from forum.domain.model.subject import Subject
from forum.domain.value import SubjectId


class SubjectRepository(ABC):
    """Read access to subjects that scope topics."""

    @abstractmethod
    async def find_by_id(self, subject_id: SubjectId) -> Optional[Subject]:
        """Find a subject by ID."""
        pass

    @abstractmethod
    async def save(self, subject: Subject) -> Subject:
        """Save a subject."""
        pass
