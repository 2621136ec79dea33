"""Unit tests for ResolveAuthUseCase."""

import pytest

from forum.application.usecase.auth import ResolveAuthRequest, ResolveAuthUseCase
from forum.config import AuthSettings
from forum.domain.value import UserId
from forum.persistence.repository.inmemory import InMemoryDatabase
from tests.conftest import seed_token, seed_users
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

FAR_FUTURE = 4_000_000_000


class TestExtractCredential:
    """Tests for picking the credential of a request."""

    @pytest.mark.asyncio
    async def test_bearer_header_wins_over_cookie(self, unit_env):
        use_case = await unit_env.get(ResolveAuthUseCase)
        cookie = (await unit_env.get(AuthSettings)).session_cookie_name

        credential = use_case.extract_credential(
            ResolveAuthRequest(authorization="Bearer abc", cookies={cookie: "xyz"})
        )

        assert credential == "abc"

    @pytest.mark.asyncio
    async def test_falls_back_to_session_cookie(self, unit_env):
        use_case = await unit_env.get(ResolveAuthUseCase)
        cookie = (await unit_env.get(AuthSettings)).session_cookie_name

        assert (
            use_case.extract_credential(ResolveAuthRequest(cookies={cookie: "xyz"}))
            == "xyz"
        )
        assert (
            use_case.extract_credential(
                ResolveAuthRequest(authorization="Basic abc", cookies={cookie: "xyz"})
            )
            == "xyz"
        )

    @pytest.mark.asyncio
    async def test_no_credential(self, unit_env):
        use_case = await unit_env.get(ResolveAuthUseCase)

        assert use_case.extract_credential(ResolveAuthRequest()) == ""


class TestResolveAuthUseCase:
    """Tests for resolving a request into an auth context."""

    @pytest.mark.asyncio
    async def test_resolves_bearer_token(self, unit_env):
        # Arrange
        db = await unit_env.get(InMemoryDatabase)
        seed_users(db, 1)
        seed_token(db, "abc", user_id=1, expires_at=FAR_FUTURE)
        use_case = await unit_env.get(ResolveAuthUseCase)

        # Act
        auth = await use_case.execute(ResolveAuthRequest(authorization="Bearer abc"))

        # Assert
        assert auth.login is True
        assert auth.user_id == UserId(1)

    @pytest.mark.asyncio
    async def test_anonymous_without_credential(self, unit_env):
        use_case = await unit_env.get(ResolveAuthUseCase)

        auth = await use_case.execute(ResolveAuthRequest())

        assert auth.login is False
