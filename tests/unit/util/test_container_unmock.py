"""Unit tests for selective unmocking of the test container."""

import pytest

from forum.domain.repository import NotificationSink, UserRepository
from forum.persistence.repository.inmemory import InMemoryUserRepository
from tests.di import build_test_container


class TestBuildTestContainer:
    """Tests for build_test_container."""

    def test_unknown_component_rejected(self):
        with pytest.raises(ValueError, match="Unknown components"):
            build_test_container(unmock={"cache"})

    def test_notify_requires_persistence(self):
        with pytest.raises(ValueError, match="requires"):
            build_test_container(unmock={"notify"})

    @pytest.mark.asyncio
    async def test_default_container_uses_in_memory_components(self):
        container = build_test_container()

        async with container() as request_container:
            user_repo = await request_container.get(UserRepository)
            sink = await request_container.get(NotificationSink)

        assert isinstance(user_repo, InMemoryUserRepository)
        assert sink.sent == []
        await container.close()
