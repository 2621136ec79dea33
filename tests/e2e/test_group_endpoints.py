"""End-to-end tests for group and subject endpoints."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from forum.domain.model import Subject
from forum.domain.value import SubjectId
from forum.interface.api.app import create_app
from forum.persistence.repository.inmemory import InMemoryDatabase
from forum.util.di.container import setup_di
from tests.conftest import (
    make_group,
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
    """Test container shared by the app and the seeding fixture."""
    return build_test_container()


@pytest.fixture
def db(container):
    """Public group ``sandbox`` with one topic and private group ``secret``."""
    database = asyncio.run(container.get(InMemoryDatabase))
    seed_users(database, 1, 2)
    seed_token(database, "t1", user_id=1, expires_at=FAR_FUTURE)
    seed_group(database, make_group(1, "sandbox"), 1)
    seed_group(database, make_group(2, "secret", accessible=False), 2)
    seed_topic(database, make_topic(1, group_id=1, creator_id=1))
    database.subjects[SubjectId(8)] = Subject(id=SubjectId(8), name="Cowboy Bebop")
    return database


@pytest.fixture
def client(container, db):
    """Create test client with test container."""
    app_instance = create_app(with_container=False)
    setup_di(app_instance, container)
    return TestClient(app_instance)


class TestGroupEndpoints:
    """End-to-end tests for group API endpoints."""

    def test_get_group_profile(self, client):
        # Act
        response = client.get("/groups/sandbox/profile")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["group"]["title"] == "Sandbox"
        assert data["total_topics"] == 1
        assert data["in_group"] is False
        assert [m["id"] for m in data["recent_added_members"]] == [1]

    def test_get_missing_group_profile(self, client):
        response = client.get("/groups/nowhere/profile")

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    def test_list_members_by_role(self, client):
        response = client.get("/groups/sandbox/members", params={"type": "mod"})

        assert response.status_code == 200
        assert response.json() == {"total": 0, "data": []}

    def test_list_members_rejects_unknown_role(self, client):
        response = client.get("/groups/sandbox/members", params={"type": "owner"})

        assert response.status_code == 422

    def test_list_topics(self, client):
        response = client.get("/groups/sandbox/topics")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 1
        assert data["data"][0]["creator"]["username"] == "user1"

    def test_private_group_topics_need_membership(self, client):
        response = client.get("/groups/secret/topics")

        assert response.status_code == 401
        assert response.json()["code"] == "NOT_JOIN_PRIVATE_GROUP_ERROR"

    def test_create_topic(self, client, db):
        # Act
        response = client.post(
            "/groups/sandbox/topics",
            json={"title": "New", "content": "Body"},
            headers={"Authorization": "Bearer t1"},
        )

        # Assert
        assert response.status_code == 200
        topic_id = response.json()["id"]
        assert db.topics[topic_id].title == "New"

    def test_create_topic_without_login(self, client):
        response = client.post(
            "/groups/sandbox/topics", json={"title": "New", "content": "Body"}
        )

        assert response.status_code == 401
        assert response.json()["code"] == "NEED_LOGIN"


class TestSubjectEndpoints:
    """End-to-end tests for subject topic listings."""

    def test_subject_topics_not_implemented(self, client):
        response = client.get("/subjects/8/topics")

        assert response.status_code == 501
        assert response.json()["code"] == "UNIMPLEMENTED"

    def test_missing_subject(self, client):
        response = client.get("/subjects/9/topics")

        assert response.status_code == 404
