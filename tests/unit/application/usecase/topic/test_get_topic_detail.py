"""Unit tests for GetTopicDetailUseCase."""

import pytest

from forum.application.usecase.topic import (
    GetTopicDetailRequest,
    GetTopicDetailUseCase,
)
from forum.domain.error import DataIntegrityError, NotFoundError
from forum.domain.repository import FriendRepository, UserRepository
from forum.domain.value import Auth, GroupId, ReplyState, TopicDisplay, UserId
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


async def _seed(unit_env, display: TopicDisplay = TopicDisplay.NORMAL) -> InMemoryDatabase:
    db = await unit_env.get(InMemoryDatabase)
    seed_users(db, 1, 2, 3, 4)
    seed_group(db, make_group(1, "sandbox"))
    seed_topic(
        db,
        make_topic(1, group_id=1, creator_id=1, display=display),
        make_reply(101, topic_id=1, creator_id=2),
        make_reply(102, topic_id=1, creator_id=3, related=101),
        make_reply(103, topic_id=1, creator_id=4, state=ReplyState.ADMIN_DELETE),
        make_reply(104, topic_id=1, creator_id=2, related=103),
    )
    return db


class TestGetTopicDetailUseCase:
    """Tests for GetTopicDetailUseCase."""

    @pytest.mark.asyncio
    async def test_detail_hides_deleted_threads(self, unit_env):
        # Arrange
        await _seed(unit_env)
        use_case = await unit_env.get(GetTopicDetailUseCase)
        user_repo = await unit_env.get(UserRepository)

        # Act
        result = await use_case.execute(
            GetTopicDetailRequest(topic_id=1, auth=Auth.anonymous())
        )

        # Assert
        assert result.title == "Topic 1"
        assert result.text == "body of Topic 1"
        assert result.group.name == "sandbox"
        assert result.creator.id == 1
        assert [r.id for r in result.replies] == [101]
        assert [r.id for r in result.replies[0].replies] == [102]
        # All creators loaded in one batch
        assert user_repo.batch_calls == 1

    @pytest.mark.asyncio
    async def test_moderator_sees_deleted_threads(self, unit_env):
        await _seed(unit_env)
        use_case = await unit_env.get(GetTopicDetailUseCase)

        result = await use_case.execute(
            GetTopicDetailRequest(topic_id=1, auth=login(9, manage_topic_state=True))
        )

        assert [r.id for r in result.replies] == [101, 103]
        assert [r.id for r in result.replies[1].replies] == [104]

    @pytest.mark.asyncio
    async def test_friend_flag_follows_viewer(self, unit_env):
        # Arrange
        await _seed(unit_env)
        friend_repo = await unit_env.get(FriendRepository)
        await friend_repo.add(UserId(1), UserId(3))
        use_case = await unit_env.get(GetTopicDetailUseCase)

        # Act
        result = await use_case.execute(GetTopicDetailRequest(topic_id=1, auth=login(1)))

        # Assert
        assert result.replies[0].is_friend is False
        assert result.replies[0].replies[0].is_friend is True

    @pytest.mark.asyncio
    async def test_topic_under_review_visible_to_creator_only(self, unit_env):
        await _seed(unit_env, display=TopicDisplay.REVIEW)
        use_case = await unit_env.get(GetTopicDetailUseCase)

        result = await use_case.execute(GetTopicDetailRequest(topic_id=1, auth=login(1)))
        assert result.id == 1

        with pytest.raises(NotFoundError):
            await use_case.execute(GetTopicDetailRequest(topic_id=1, auth=login(2)))

    @pytest.mark.asyncio
    async def test_missing_topic_not_found(self, unit_env):
        use_case = await unit_env.get(GetTopicDetailUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetTopicDetailRequest(topic_id=5, auth=Auth.anonymous())
            )

    @pytest.mark.asyncio
    async def test_missing_group_is_integrity_error(self, unit_env):
        db = await _seed(unit_env)
        del db.groups[GroupId(1)]
        use_case = await unit_env.get(GetTopicDetailUseCase)

        with pytest.raises(DataIntegrityError):
            await use_case.execute(
                GetTopicDetailRequest(topic_id=1, auth=Auth.anonymous())
            )
