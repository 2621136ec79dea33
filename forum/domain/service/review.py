"""Content review interface."""


class ReviewFilter:
    """Interface deciding whether new content must be held for review."""

    def needs_review(self, text: str) -> bool:
        """Check text against the review rules.

        Args:
            text: Title or body of new content

        Returns:
            True if the content must wait for a moderator
        """
        raise NotImplementedError
