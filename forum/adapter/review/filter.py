"""Word list review filter."""

from typing import Iterable

from forum.domain.service import ReviewFilter


class WordListReviewFilter(ReviewFilter):
    """Flags text containing any configured word, ignoring case."""

    def __init__(self, words: Iterable[str]) -> None:
        """Initialize the filter.

        Args:
            words: Words that send content to review; blanks are ignored
        """
        self.words = [w.casefold() for w in words if w.strip()]

    def needs_review(self, text: str) -> bool:
        """Check text against the word list."""
        folded = text.casefold()
        return any(word in folded for word in self.words)
