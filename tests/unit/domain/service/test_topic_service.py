"""Unit tests for TopicService."""

import pytest

from forum.domain.error import NotAllowedError, NotFoundError, UnimplementedError
from forum.domain.service import TopicService
from forum.domain.service.ranking import SPECIAL_GROUP_ID, compute_ordering_score
from forum.domain.value import (
    GroupId,
    ReplyId,
    ReplyState,
    TopicDisplay,
    TopicId,
    TopicType,
    UserId,
)
from forum.persistence.repository.inmemory import (
    InMemoryDatabase,
    InMemoryReplyRepository,
    InMemoryTopicRepository,
    InMemoryUnitOfWork,
)
from tests.conftest import NOW, make_reply, make_topic, seed_topic
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class FailingTopicRepository(InMemoryTopicRepository):
    """Topic repository whose counter update always fails."""

    async def record_reply(self, topic_id, updated_at, dateline):
        raise RuntimeError("connection lost")


class TestListTopics:
    """Tests for listing topics."""

    @pytest.mark.asyncio
    async def test_list_filters_by_display(self, unit_env):
        # Arrange
        db = await unit_env.get(InMemoryDatabase)
        service = await unit_env.get(TopicService)
        seed_topic(db, make_topic(1, group_id=1, creator_id=1))
        seed_topic(db, make_topic(2, group_id=1, creator_id=1, display=TopicDisplay.REVIEW))
        seed_topic(db, make_topic(3, group_id=1, creator_id=1, display=TopicDisplay.BAN))
        seed_topic(db, make_topic(4, group_id=2, creator_id=1))

        # Act
        total, topics = await service.list_topics(
            TopicType.GROUP, 1, [TopicDisplay.NORMAL]
        )
        mod_total, mod_topics = await service.list_topics(
            TopicType.GROUP, 1, [TopicDisplay.NORMAL, TopicDisplay.REVIEW]
        )

        # Assert
        assert total == 1
        assert [t.id for t in topics] == [1]
        assert mod_total == 2
        assert {t.id for t in mod_topics} == {1, 2}

    @pytest.mark.asyncio
    async def test_list_orders_by_ordering_score(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        service = await unit_env.get(TopicService)
        seed_topic(db, make_topic(1, group_id=1, creator_id=1, created_at=NOW - 300))
        seed_topic(db, make_topic(2, group_id=1, creator_id=1, created_at=NOW - 100))
        seed_topic(db, make_topic(3, group_id=1, creator_id=1, created_at=NOW - 200))

        total, topics = await service.list_topics(
            TopicType.GROUP, 1, [TopicDisplay.NORMAL], limit=2
        )

        assert total == 3
        assert [t.id for t in topics] == [2, 3]

    @pytest.mark.asyncio
    async def test_subject_topics_unimplemented(self, unit_env):
        service = await unit_env.get(TopicService)

        with pytest.raises(UnimplementedError):
            await service.list_topics(TopicType.SUBJECT, 1, [TopicDisplay.NORMAL])

        with pytest.raises(UnimplementedError):
            await service.get_topic_detail(TopicType.SUBJECT, TopicId(1))


class TestGetTopicDetail:
    """Tests for loading a topic thread."""

    @pytest.mark.asyncio
    async def test_detail_assembles_thread(self, unit_env):
        # Arrange
        db = await unit_env.get(InMemoryDatabase)
        service = await unit_env.get(TopicService)
        seed_topic(
            db,
            make_topic(1, group_id=1, creator_id=1),
            make_reply(101, topic_id=1, creator_id=2),
            make_reply(102, topic_id=1, creator_id=3, related=101),
        )

        # Act
        detail = await service.get_topic_detail(TopicType.GROUP, TopicId(1))

        # Assert
        assert detail is not None
        assert detail.top.id == 100
        assert detail.replies[0].reply.id == 101
        assert [r.id for r in detail.replies[0].replies] == [102]

    @pytest.mark.asyncio
    async def test_missing_topic_returns_none(self, unit_env):
        service = await unit_env.get(TopicService)

        assert await service.get_topic_detail(TopicType.GROUP, TopicId(42)) is None


class TestCreateTopic:
    """Tests for creating topics."""

    @pytest.mark.asyncio
    async def test_creates_topic_with_body_post(self, unit_env):
        # Arrange
        db = await unit_env.get(InMemoryDatabase)
        service = await unit_env.get(TopicService)

        # Act
        topic = await service.create_topic(
            group_id=GroupId(1),
            creator_id=UserId(7),
            title="Hello",
            content="First!",
            display=TopicDisplay.REVIEW,
            now=NOW,
        )

        # Assert
        stored = db.topics[topic.id]
        assert stored.display == TopicDisplay.REVIEW
        assert stored.dateline == NOW
        assert stored.replies == 0
        rows = [r for r in db.replies.values() if r.topic_id == topic.id]
        assert len(rows) == 1
        assert rows[0].content == "First!"
        assert rows[0].related == 0


class TestCreateReply:
    """Tests for the reply transaction."""

    @pytest.mark.asyncio
    async def test_reply_increments_counter_and_bumps_topic(self, unit_env):
        # Arrange
        db = await unit_env.get(InMemoryDatabase)
        service = await unit_env.get(TopicService)
        seed_topic(db, make_topic(1, group_id=1, creator_id=1, replies=3))

        # Act
        reply = await service.create_reply(
            TopicId(1), UserId(2), "hi", now=NOW
        )

        # Assert
        topic = db.topics[TopicId(1)]
        assert topic.replies == 4
        assert topic.updated_at == NOW
        assert topic.dateline == NOW
        assert db.replies[reply.id].content == "hi"
        assert reply.related == 0

    @pytest.mark.asyncio
    async def test_special_group_dateline_uses_ordering_score(self, unit_env):
        # Arrange
        db = await unit_env.get(InMemoryDatabase)
        service = await unit_env.get(TopicService)
        before = seed_topic(
            db,
            make_topic(
                1,
                group_id=SPECIAL_GROUP_ID,
                creator_id=1,
                replies=10,
                created_at=NOW - 100_000,
            ),
        )

        # Act
        await service.create_reply(TopicId(1), UserId(2), "hi", now=NOW)

        # Assert
        topic = db.topics[TopicId(1)]
        assert topic.dateline == compute_ordering_score(NOW, before)
        assert topic.dateline < NOW
        assert topic.updated_at == NOW

    @pytest.mark.asyncio
    async def test_silenced_topic_keeps_dateline(self, unit_env):
        # Arrange
        db = await unit_env.get(InMemoryDatabase)
        service = await unit_env.get(TopicService)
        before = seed_topic(
            db,
            make_topic(
                1, group_id=1, creator_id=1, state=ReplyState.ADMIN_SILENT_TOPIC
            ),
        )

        # Act
        await service.create_reply(TopicId(1), UserId(2), "hi", now=NOW)

        # Assert
        topic = db.topics[TopicId(1)]
        assert topic.dateline == before.dateline
        assert topic.replies == 1
        assert topic.updated_at == NOW

    @pytest.mark.asyncio
    async def test_closed_topic_rejects_reply(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        service = await unit_env.get(TopicService)
        seed_topic(
            db,
            make_topic(1, group_id=1, creator_id=1, state=ReplyState.ADMIN_CLOSE_TOPIC),
        )

        with pytest.raises(NotAllowedError):
            await service.create_reply(TopicId(1), UserId(2), "hi", now=NOW)

        assert len(db.replies) == 1

    @pytest.mark.asyncio
    async def test_missing_topic_raises_not_found(self, unit_env):
        service = await unit_env.get(TopicService)

        with pytest.raises(NotFoundError):
            await service.create_reply(TopicId(9), UserId(2), "hi", now=NOW)

    @pytest.mark.asyncio
    async def test_nested_reply_keeps_related(self, unit_env):
        db = await unit_env.get(InMemoryDatabase)
        service = await unit_env.get(TopicService)
        seed_topic(
            db,
            make_topic(1, group_id=1, creator_id=1),
            make_reply(101, topic_id=1, creator_id=2),
        )

        reply = await service.create_reply(
            TopicId(1), UserId(3), "me too", related=ReplyId(101), now=NOW
        )

        assert db.replies[reply.id].related == 101

    @pytest.mark.asyncio
    async def test_failed_counter_update_rolls_back_reply(self):
        # Arrange
        db = InMemoryDatabase()
        seed_topic(db, make_topic(1, group_id=1, creator_id=1, replies=3))
        service = TopicService(
            topic_repository=FailingTopicRepository(db),
            reply_repository=InMemoryReplyRepository(db),
            unit_of_work=InMemoryUnitOfWork(db),
        )

        # Act
        with pytest.raises(RuntimeError):
            await service.create_reply(TopicId(1), UserId(2), "lost", now=NOW)

        # Assert
        assert [r.id for r in db.replies.values()] == [100]
        assert db.topics[TopicId(1)].replies == 3
