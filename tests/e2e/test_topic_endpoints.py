"""End-to-end tests for topic and reply endpoints."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from forum.config import AuthSettings
from forum.domain.repository import NotificationSink
from forum.domain.value import NotificationType, ReplyState, TopicId
from forum.interface.api.app import create_app
from forum.persistence.repository.inmemory import InMemoryDatabase
from forum.util.di.container import setup_di
from tests.conftest import (
    make_group,
    make_reply,
    make_topic,
    seed_group,
    seed_token,
    seed_topic,
    seed_users,
)
from tests.di import build_test_container

FAR_FUTURE = 4_000_000_000


@pytest.fixture
def container():
    """Test container shared by the app and the seeding fixtures."""
    return build_test_container()


@pytest.fixture
def db(container):
    """Seeded in-memory database behind the app.

    User 1 owns topic 1 in the public group ``sandbox``; user 2 holds the
    token ``t2``. Reply 101 is normal, 102 is deleted.
    """
    database = asyncio.run(container.get(InMemoryDatabase))
    seed_users(database, 1, 2)
    seed_token(database, "t2", user_id=2, expires_at=FAR_FUTURE)
    seed_group(database, make_group(1, "sandbox"), 1, 2)
    seed_topic(
        database,
        make_topic(1, group_id=1, creator_id=1),
        make_reply(101, topic_id=1, creator_id=1),
        make_reply(102, topic_id=1, creator_id=2, state=ReplyState.USER_DELETE),
    )
    return database


@pytest.fixture
def sink(container):
    """Notification sink behind the app."""
    return asyncio.run(container.get(NotificationSink))


@pytest.fixture
def client(container, db):
    """Create test client with test container."""
    app_instance = create_app(with_container=False)
    setup_di(app_instance, container)
    return TestClient(app_instance)


class TestTopicEndpoints:
    """End-to-end tests for topic API endpoints.

    Note: These tests focus on the HTTP API interface layer.
    More detailed business logic tests are in unit tests.
    """

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_get_topic_detail(self, client):
        # Act
        response = client.get("/groups/-/topics/1")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "Topic 1"
        assert data["group"]["name"] == "sandbox"
        assert [r["id"] for r in data["replies"]] == [101]
        assert data["creator"]["avatar"]["large"].endswith("/l/icon.jpg")

    def test_get_missing_topic_returns_404(self, client):
        # Act
        response = client.get("/groups/-/topics/999")

        # Assert
        assert response.status_code == 404
        body = response.json()
        assert body["code"] == "NOT_FOUND"
        assert body["status_code"] == 404
        assert body["error"] == "Not Found"

    def test_reply_without_login_returns_401(self, client):
        response = client.post("/groups/-/topics/1/replies", json={"content": "hi"})

        assert response.status_code == 401
        assert response.json()["code"] == "NEED_LOGIN"

    def test_reply_with_bearer_token(self, client, db, sink):
        # Act
        response = client.post(
            "/groups/-/topics/1/replies",
            json={"content": "hi", "replyTo": 101},
            headers={"Authorization": "Bearer t2"},
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["text"] == "hi"
        assert data["creator"]["id"] == 2
        assert db.topics[TopicId(1)].replies == 1
        assert [n.type for n in sink.sent] == [NotificationType.GROUP_POST_REPLY]
        assert sink.sent[0].dest_user_id == 1

    def test_reply_with_session_cookie(self, client, db):
        # Arrange
        client.cookies.set(AuthSettings().session_cookie_name, "t2")

        # Act
        response = client.post("/groups/-/topics/1/replies", json={"content": "hi"})

        # Assert
        assert response.status_code == 200
        assert response.json()["creator"]["id"] == 2

    def test_reply_to_deleted_reply_returns_404(self, client):
        response = client.post(
            "/groups/-/topics/1/replies",
            json={"content": "hi", "replyTo": 102},
            headers={"Authorization": "Bearer t2"},
        )

        assert response.status_code == 404

    def test_empty_reply_rejected(self, client):
        response = client.post(
            "/groups/-/topics/1/replies",
            json={"content": ""},
            headers={"Authorization": "Bearer t2"},
        )

        assert response.status_code == 422

    def test_token_without_user_returns_500(self, client, db):
        seed_token(db, "orphan", user_id=404, expires_at=FAR_FUTURE)

        response = client.get(
            "/groups/-/topics/1", headers={"Authorization": "Bearer orphan"}
        )

        assert response.status_code == 500
        assert response.json()["code"] == "UNEXPECTED_NOT_FOUND"
