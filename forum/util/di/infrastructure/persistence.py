"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from forum.config import Settings
from forum.domain.repository import (
    AccessTokenRepository,
    FriendRepository,
    GroupMemberRepository,
    GroupRepository,
    ReplyRepository,
    SubjectRepository,
    TopicRepository,
    UnitOfWork,
    UserGroupRepository,
    UserRepository,
)
from forum.persistence.database import create_engine, create_session_factory
from forum.persistence.repository import (
    PostgresAccessTokenRepository,
    PostgresFriendRepository,
    PostgresGroupMemberRepository,
    PostgresGroupRepository,
    PostgresReplyRepository,
    PostgresSubjectRepository,
    PostgresTopicRepository,
    PostgresUnitOfWork,
    PostgresUserGroupRepository,
    PostgresUserRepository,
)
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is automatically committed at the end of the request
        if no exception occurred, or rolled back if an exception was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self, session: AsyncSession) -> UnitOfWork:
        """Provide unit of work bound to the request session."""
        return PostgresUnitOfWork(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        """Provide User repository."""
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_user_group_repository(self, session: AsyncSession) -> UserGroupRepository:
        """Provide UserGroup repository."""
        return PostgresUserGroupRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_access_token_repository(
        self, session: AsyncSession
    ) -> AccessTokenRepository:
        """Provide AccessToken repository."""
        return PostgresAccessTokenRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_friend_repository(self, session: AsyncSession) -> FriendRepository:
        """Provide Friend repository."""
        return PostgresFriendRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_group_repository(self, session: AsyncSession) -> GroupRepository:
        """Provide Group repository."""
        return PostgresGroupRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_group_member_repository(
        self, session: AsyncSession
    ) -> GroupMemberRepository:
        """Provide GroupMember repository."""
        return PostgresGroupMemberRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_topic_repository(self, session: AsyncSession) -> TopicRepository:
        """Provide Topic repository."""
        return PostgresTopicRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_reply_repository(self, session: AsyncSession) -> ReplyRepository:
        """Provide Reply repository."""
        return PostgresReplyRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_subject_repository(self, session: AsyncSession) -> SubjectRepository:
        """Provide Subject repository."""
        return PostgresSubjectRepository(session)
