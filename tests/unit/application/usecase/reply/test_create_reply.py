"""Unit tests for CreateReplyUseCase."""

import pytest

from forum.application.usecase.reply import CreateReplyRequest, CreateReplyUseCase
from forum.config import Settings
from forum.domain.error import (
    NeedLoginError,
    NotAllowedError,
    NotFoundError,
    NotJoinPrivateGroupError,
)
from forum.domain.repository import NotificationSink
from forum.domain.service import (
    GroupService,
    NotificationService,
    TopicService,
    UserService,
)
from forum.domain.value import (
    Auth,
    NotificationType,
    ReplyState,
    TopicId,
)
from forum.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import (
    login,
    make_group,
    make_reply,
    make_topic,
    seed_group,
    seed_topic,
    seed_users,
)
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class BrokenSink(NotificationSink):
    """Sink that always fails."""

    async def send(self, notification):
        raise ConnectionError("queue down")


async def _seed_thread(unit_env) -> InMemoryDatabase:
    """Public group 1 with topic 1 by user 1.

    Thread: 101 (user 2) with nested 102 (user 3); 103 deleted (user 4).
    """
    db = await unit_env.get(InMemoryDatabase)
    seed_users(db, 1, 2, 3, 4, 5)
    seed_group(db, make_group(1, "sandbox"))
    seed_topic(
        db,
        make_topic(1, group_id=1, creator_id=1, replies=3),
        make_reply(101, topic_id=1, creator_id=2),
        make_reply(102, topic_id=1, creator_id=3, related=101),
        make_reply(103, topic_id=1, creator_id=4, state=ReplyState.USER_DELETE),
    )
    return db


class TestCreateReplyUseCase:
    """Tests for CreateReplyUseCase."""

    @pytest.mark.asyncio
    async def test_reply_to_topic(self, unit_env):
        # Arrange
        db = await _seed_thread(unit_env)
        use_case = await unit_env.get(CreateReplyUseCase)
        sink = await unit_env.get(NotificationSink)

        # Act
        result = await use_case.execute(
            CreateReplyRequest(topic_id=1, content="hello", auth=login(5))
        )

        # Assert
        assert result.text == "hello"
        assert result.creator.id == 5
        assert result.creator.username == "user5"
        stored = db.replies[result.id]
        assert stored.related == 0
        assert db.topics[TopicId(1)].replies == 4

        assert len(sink.sent) == 1
        notification = sink.sent[0]
        assert notification.type == NotificationType.GROUP_TOPIC_REPLY
        assert notification.dest_user_id == 1
        assert notification.source_user_id == 5
        assert notification.post_id == result.id
        assert notification.title == "Topic 1"

    @pytest.mark.asyncio
    async def test_reply_to_nested_reply_stays_under_root(self, unit_env):
        # Arrange
        db = await _seed_thread(unit_env)
        use_case = await unit_env.get(CreateReplyUseCase)
        sink = await unit_env.get(NotificationSink)

        # Act
        result = await use_case.execute(
            CreateReplyRequest(topic_id=1, content="+1", reply_to=102, auth=login(5))
        )

        # Assert
        assert db.replies[result.id].related == 101
        assert sink.sent[0].type == NotificationType.GROUP_POST_REPLY
        assert sink.sent[0].dest_user_id == 3

    @pytest.mark.asyncio
    async def test_reply_to_top_level_reply(self, unit_env):
        db = await _seed_thread(unit_env)
        use_case = await unit_env.get(CreateReplyUseCase)
        sink = await unit_env.get(NotificationSink)

        result = await use_case.execute(
            CreateReplyRequest(topic_id=1, content="+1", reply_to=101, auth=login(5))
        )

        assert db.replies[result.id].related == 101
        assert sink.sent[0].dest_user_id == 2

    @pytest.mark.asyncio
    async def test_reply_to_deleted_reply_not_found(self, unit_env):
        db = await _seed_thread(unit_env)
        use_case = await unit_env.get(CreateReplyUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateReplyRequest(
                    topic_id=1, content="+1", reply_to=103, auth=login(5)
                )
            )

        assert db.topics[TopicId(1)].replies == 3

    @pytest.mark.asyncio
    async def test_reply_to_unknown_reply_not_found(self, unit_env):
        await _seed_thread(unit_env)
        use_case = await unit_env.get(CreateReplyUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateReplyRequest(
                    topic_id=1, content="+1", reply_to=999, auth=login(5)
                )
            )

    @pytest.mark.asyncio
    async def test_anonymous_needs_login(self, unit_env):
        await _seed_thread(unit_env)
        use_case = await unit_env.get(CreateReplyUseCase)

        with pytest.raises(NeedLoginError):
            await use_case.execute(
                CreateReplyRequest(topic_id=1, content="hi", auth=Auth.anonymous())
            )

    @pytest.mark.asyncio
    async def test_banned_user_not_allowed(self, unit_env):
        await _seed_thread(unit_env)
        use_case = await unit_env.get(CreateReplyUseCase)

        with pytest.raises(NotAllowedError) as exc_info:
            await use_case.execute(
                CreateReplyRequest(topic_id=1, content="hi", auth=login(5, ban_post=True))
            )

        assert not isinstance(exc_info.value, NeedLoginError)

    @pytest.mark.asyncio
    async def test_missing_topic_not_found(self, unit_env):
        await _seed_thread(unit_env)
        use_case = await unit_env.get(CreateReplyUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateReplyRequest(topic_id=77, content="hi", auth=login(5))
            )

    @pytest.mark.asyncio
    async def test_closed_topic_not_allowed(self, unit_env):
        # Arrange
        db = await unit_env.get(InMemoryDatabase)
        seed_users(db, 1, 5)
        seed_group(db, make_group(1, "sandbox"))
        seed_topic(
            db,
            make_topic(1, group_id=1, creator_id=1, state=ReplyState.ADMIN_CLOSE_TOPIC),
        )
        use_case = await unit_env.get(CreateReplyUseCase)
        sink = await unit_env.get(NotificationSink)

        # Act / Assert
        with pytest.raises(NotAllowedError):
            await use_case.execute(
                CreateReplyRequest(topic_id=1, content="hi", auth=login(5))
            )
        assert db.topics[TopicId(1)].replies == 0
        assert sink.sent == []

    @pytest.mark.asyncio
    async def test_private_group_requires_membership(self, unit_env):
        # Arrange
        db = await unit_env.get(InMemoryDatabase)
        seed_users(db, 1, 5, 6)
        seed_group(db, make_group(1, "secret", accessible=False), 1, 6)
        seed_topic(db, make_topic(1, group_id=1, creator_id=1))
        use_case = await unit_env.get(CreateReplyUseCase)

        # Act / Assert
        with pytest.raises(NotJoinPrivateGroupError):
            await use_case.execute(
                CreateReplyRequest(topic_id=1, content="hi", auth=login(5))
            )

        result = await use_case.execute(
            CreateReplyRequest(topic_id=1, content="hi", auth=login(6))
        )
        assert result.creator.id == 6

    @pytest.mark.asyncio
    async def test_notification_failure_does_not_fail_reply(self, unit_env):
        # Arrange
        db = await _seed_thread(unit_env)
        use_case = CreateReplyUseCase(
            topic_service=await unit_env.get(TopicService),
            group_service=await unit_env.get(GroupService),
            user_service=await unit_env.get(UserService),
            notification_service=NotificationService(sink=BrokenSink()),
            settings=await unit_env.get(Settings),
        )

        # Act
        result = await use_case.execute(
            CreateReplyRequest(topic_id=1, content="hello", auth=login(5))
        )

        # Assert
        assert result.id in db.replies
        assert db.topics[TopicId(1)].replies == 4
