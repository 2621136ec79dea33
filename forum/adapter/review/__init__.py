"""Content review adapters."""

from .filter import WordListReviewFilter

__all__ = ["WordListReviewFilter"]
