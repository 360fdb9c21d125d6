"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from alumni.config import Settings
from alumni.domain.repository import (
    AccountRepository,
    CommentRepository,
    EventRegistrationRepository,
    EventRepository,
    PostLikeRepository,
    PostRepository,
    StaffRepository,
)
from alumni.persistence.database import create_engine, create_session_factory
from alumni.persistence.repository import (
    PostgresAccountRepository,
    PostgresCommentRepository,
    PostgresEventRegistrationRepository,
    PostgresEventRepository,
    PostgresPostLikeRepository,
    PostgresPostRepository,
    PostgresStaffRepository,
)
from alumni.util.di.base import ProviderBase
from alumni.util.observability import instrument_sqlalchemy


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
        engine = create_engine(settings.database, echo=settings.debug)
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

        The session is committed at the end of the request if no exception
        occurred, or rolled back if an exception was raised.
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
    def get_account_repository(self, session: AsyncSession) -> AccountRepository:
        """Provide Account repository."""
        return PostgresAccountRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_like_repository(self, session: AsyncSession) -> PostLikeRepository:
        """Provide PostLike repository."""
        return PostgresPostLikeRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_event_repository(self, session: AsyncSession) -> EventRepository:
        """Provide Event repository."""
        return PostgresEventRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_event_registration_repository(
        self, session: AsyncSession
    ) -> EventRegistrationRepository:
        """Provide EventRegistration repository."""
        return PostgresEventRegistrationRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_staff_repository(self, session: AsyncSession) -> StaffRepository:
        """Provide Staff repository."""
        return PostgresStaffRepository(session)
