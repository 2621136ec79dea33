"""Subject entity.

Only the fields needed to scope topics are modelled here.
"""

from forum.domain.model.common import DomainModel
from forum.domain.value import SubjectId


class Subject(DomainModel):
    """Catalogue subject that may own topics."""

    id: SubjectId
    name: str
    nsfw: bool = False
