"""Unit tests for the topic ordering score."""

import math

from forum.domain.service.ranking import SPECIAL_GROUP_ID, compute_ordering_score
from tests.conftest import make_topic


class TestComputeOrderingScore:
    """Tests for compute_ordering_score."""

    def test_regular_group_uses_reply_time(self):
        topic = make_topic(1, group_id=1, creator_id=1, replies=10, created_at=900_000)

        assert compute_ordering_score(1_000_000, topic) == 1_000_000

    def test_special_group_without_replies_uses_reply_time(self):
        topic = make_topic(
            1, group_id=SPECIAL_GROUP_ID, creator_id=1, replies=0, created_at=900_000
        )

        assert compute_ordering_score(1_000_000, topic) == 1_000_000

    def test_special_group_decays_with_age(self):
        # Arrange
        now = 1_000_000
        topic = make_topic(
            1, group_id=SPECIAL_GROUP_ID, creator_id=1, replies=10, created_at=900_000
        )
        age_hours = 100_000 / 3600
        expected = math.floor(now - (age_hours + 0.1) ** 1.8 / 10 * 200)

        # Act
        score = compute_ordering_score(now, topic)

        # Assert
        assert score == expected
        assert score < now

    def test_more_replies_means_smaller_penalty(self):
        few = make_topic(
            1, group_id=SPECIAL_GROUP_ID, creator_id=1, replies=2, created_at=900_000
        )
        many = make_topic(
            2, group_id=SPECIAL_GROUP_ID, creator_id=1, replies=50, created_at=900_000
        )

        assert compute_ordering_score(1_000_000, few) < compute_ordering_score(
            1_000_000, many
        )

    def test_score_never_exceeds_now(self):
        # Created "in the future" relative to now, e.g. clock skew
        topic = make_topic(
            1, group_id=SPECIAL_GROUP_ID, creator_id=1, replies=1, created_at=1_000_000
        )

        assert compute_ordering_score(1_000_000, topic) <= 1_000_000
