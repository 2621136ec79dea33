"""Adapter DI providers."""

from dishka import Scope, provide

from forum.adapter.php import PhpPermissionDecoder
from forum.adapter.review import WordListReviewFilter
from forum.config import ForumSettings
from forum.domain.service import PermissionDecoder, ReviewFilter
from forum.util.di.base import ProviderBase


class AdapterProvider(ProviderBase):
    """Stateless adapters shared by every request."""

    scope = Scope.APP

    @provide
    def get_permission_decoder(self) -> PermissionDecoder:
        """Provide the PHP permission bag decoder."""
        return PhpPermissionDecoder()

    @provide
    def get_review_filter(self, forum_settings: ForumSettings) -> ReviewFilter:
        """Provide the review filter built from the configured word list."""
        return WordListReviewFilter(forum_settings.review_words)
