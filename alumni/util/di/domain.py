"""Domain layer DI providers."""

from dishka import Scope, provide

from alumni.config import AuthSettings
from alumni.domain.repository import (
    AccountRepository,
    CommentRepository,
    EventRegistrationRepository,
    EventRepository,
    PostLikeRepository,
    PostRepository,
    StaffRepository,
)
from alumni.domain.service import (
    AccountService,
    CommentService,
    EventService,
    JWTService,
    PostService,
    StaffService,
)
from alumni.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_account_service(
        self, account_repository: AccountRepository, auth_settings: AuthSettings
    ) -> AccountService:
        """Provide account domain service."""
        return AccountService(
            account_repository=account_repository, auth_settings=auth_settings
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_post_service(
        self, post_repository: PostRepository, like_repository: PostLikeRepository
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository, like_repository=like_repository
        )

    @provide
    def get_event_service(
        self,
        event_repository: EventRepository,
        registration_repository: EventRegistrationRepository,
    ) -> EventService:
        """Provide event domain service."""
        return EventService(
            event_repository=event_repository,
            registration_repository=registration_repository,
        )

    @provide
    def get_staff_service(self, staff_repository: StaffRepository) -> StaffService:
        """Provide staff directory domain service."""
        return StaffService(staff_repository=staff_repository)
