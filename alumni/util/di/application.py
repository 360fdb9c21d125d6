"""Application layer DI providers."""

from dishka import Scope, provide

from alumni.application.usecase.admin import (
    ApproveAdminUseCase,
    CreateAdminUseCase,
    DeactivateAdminUseCase,
    DeleteAdminUseCase,
    ElevateToAdminUseCase,
    GetDashboardUseCase,
    ListAdminsUseCase,
    ListAllAccountsUseCase,
    ListPendingAdminsUseCase,
    ReactivateAdminUseCase,
    RejectAdminUseCase,
    SeedSuperAdminUseCase,
)
from alumni.application.usecase.auth import (
    ChangePasswordUseCase,
    GetCurrentAccountUseCase,
    LoginUseCase,
    RegisterUseCase,
)
from alumni.application.usecase.comment import (
    DeleteCommentUseCase,
    ListCommentsUseCase,
    SubmitCommentUseCase,
)
from alumni.application.usecase.event import (
    CreateEventUseCase,
    DeleteEventUseCase,
    GetEventUseCase,
    ListEventsUseCase,
    RegisterForEventUseCase,
    UnregisterFromEventUseCase,
    UpdateEventUseCase,
)
from alumni.application.usecase.post import (
    CreatePostUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    ToggleLikeUseCase,
    UpdatePostUseCase,
)
from alumni.application.usecase.staff import (
    CreateStaffUseCase,
    DeleteStaffUseCase,
    GetStaffUseCase,
    ListStaffUseCase,
    UpdateStaffUseCase,
)
from alumni.application.usecase.user import (
    GetUserProfileUseCase,
    UpdateUserProfileUseCase,
)
from alumni.config import BootstrapSettings
from alumni.domain.service import (
    AccountService,
    CommentService,
    EventService,
    JWTService,
    PostService,
    StaffService,
)
from alumni.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(self, account_service: AccountService) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(account_service=account_service)

    @provide
    def get_login_use_case(
        self, account_service: AccountService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(account_service=account_service, jwt_service=jwt_service)

    @provide
    def get_current_account_use_case(
        self, account_service: AccountService, jwt_service: JWTService
    ) -> GetCurrentAccountUseCase:
        """Provide get current account use case."""
        return GetCurrentAccountUseCase(
            account_service=account_service, jwt_service=jwt_service
        )

    @provide
    def get_change_password_use_case(
        self, account_service: AccountService
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(account_service=account_service)

    # Comment use cases
    @provide
    def get_submit_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        account_service: AccountService,
    ) -> SubmitCommentUseCase:
        """Provide submit comment use case."""
        return SubmitCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            account_service=account_service,
        )

    @provide
    def get_list_comments_use_case(
        self, comment_service: CommentService, post_service: PostService
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service, post_service=post_service
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService, account_service: AccountService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(
            comment_service=comment_service, account_service=account_service
        )

    # Post use cases
    @provide
    def get_create_post_use_case(
        self, post_service: PostService, account_service: AccountService
    ) -> CreatePostUseCase:
        """Provide create post use case."""
        return CreatePostUseCase(
            post_service=post_service, account_service=account_service
        )

    @provide
    def get_get_post_use_case(
        self, post_service: PostService, comment_service: CommentService
    ) -> GetPostUseCase:
        """Provide get post use case."""
        return GetPostUseCase(
            post_service=post_service, comment_service=comment_service
        )

    @provide
    def get_list_posts_use_case(self, post_service: PostService) -> ListPostsUseCase:
        """Provide list posts use case."""
        return ListPostsUseCase(post_service=post_service)

    @provide
    def get_delete_post_use_case(
        self,
        post_service: PostService,
        comment_service: CommentService,
        account_service: AccountService,
    ) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(
            post_service=post_service,
            comment_service=comment_service,
            account_service=account_service,
        )

    @provide
    def get_toggle_like_use_case(self, post_service: PostService) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(post_service=post_service)

    @provide
    def get_update_post_use_case(
        self, post_service: PostService, account_service: AccountService
    ) -> UpdatePostUseCase:
        """Provide update post use case."""
        return UpdatePostUseCase(
            post_service=post_service, account_service=account_service
        )

    # Admin use cases
    @provide
    def get_approve_admin_use_case(
        self, account_service: AccountService
    ) -> ApproveAdminUseCase:
        """Provide approve admin use case."""
        return ApproveAdminUseCase(account_service=account_service)

    @provide
    def get_reject_admin_use_case(
        self, account_service: AccountService
    ) -> RejectAdminUseCase:
        """Provide reject admin use case."""
        return RejectAdminUseCase(account_service=account_service)

    @provide
    def get_deactivate_admin_use_case(
        self, account_service: AccountService
    ) -> DeactivateAdminUseCase:
        """Provide deactivate admin use case."""
        return DeactivateAdminUseCase(account_service=account_service)

    @provide
    def get_reactivate_admin_use_case(
        self, account_service: AccountService
    ) -> ReactivateAdminUseCase:
        """Provide reactivate admin use case."""
        return ReactivateAdminUseCase(account_service=account_service)

    @provide
    def get_elevate_to_admin_use_case(
        self, account_service: AccountService
    ) -> ElevateToAdminUseCase:
        """Provide elevate to admin use case."""
        return ElevateToAdminUseCase(account_service=account_service)

    @provide
    def get_delete_admin_use_case(
        self, account_service: AccountService
    ) -> DeleteAdminUseCase:
        """Provide delete admin use case."""
        return DeleteAdminUseCase(account_service=account_service)

    @provide
    def get_create_admin_use_case(
        self, account_service: AccountService
    ) -> CreateAdminUseCase:
        """Provide create admin use case."""
        return CreateAdminUseCase(account_service=account_service)

    @provide
    def get_list_pending_admins_use_case(
        self, account_service: AccountService
    ) -> ListPendingAdminsUseCase:
        """Provide list pending admins use case."""
        return ListPendingAdminsUseCase(account_service=account_service)

    @provide
    def get_list_admins_use_case(
        self, account_service: AccountService
    ) -> ListAdminsUseCase:
        """Provide list admins use case."""
        return ListAdminsUseCase(account_service=account_service)

    @provide
    def get_list_all_accounts_use_case(
        self, account_service: AccountService
    ) -> ListAllAccountsUseCase:
        """Provide list all accounts use case."""
        return ListAllAccountsUseCase(account_service=account_service)

    @provide
    def get_dashboard_use_case(
        self, account_service: AccountService, post_service: PostService
    ) -> GetDashboardUseCase:
        """Provide get dashboard use case."""
        return GetDashboardUseCase(
            account_service=account_service, post_service=post_service
        )

    @provide
    def get_seed_super_admin_use_case(
        self, account_service: AccountService, bootstrap: BootstrapSettings
    ) -> SeedSuperAdminUseCase:
        """Provide seed super admin use case."""
        return SeedSuperAdminUseCase(
            account_service=account_service, bootstrap=bootstrap
        )

    # User profile use cases
    @provide
    def get_user_profile_use_case(
        self, account_service: AccountService
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(account_service=account_service)

    @provide
    def get_update_user_profile_use_case(
        self, account_service: AccountService
    ) -> UpdateUserProfileUseCase:
        """Provide update user profile use case."""
        return UpdateUserProfileUseCase(account_service=account_service)

    # Event use cases
    @provide
    def get_list_events_use_case(
        self, event_service: EventService
    ) -> ListEventsUseCase:
        """Provide list events use case."""
        return ListEventsUseCase(event_service=event_service)

    @provide
    def get_get_event_use_case(self, event_service: EventService) -> GetEventUseCase:
        """Provide get event use case."""
        return GetEventUseCase(event_service=event_service)

    @provide
    def get_create_event_use_case(
        self, event_service: EventService, account_service: AccountService
    ) -> CreateEventUseCase:
        """Provide create event use case."""
        return CreateEventUseCase(
            event_service=event_service, account_service=account_service
        )

    @provide
    def get_update_event_use_case(
        self, event_service: EventService, account_service: AccountService
    ) -> UpdateEventUseCase:
        """Provide update event use case."""
        return UpdateEventUseCase(
            event_service=event_service, account_service=account_service
        )

    @provide
    def get_delete_event_use_case(
        self, event_service: EventService, account_service: AccountService
    ) -> DeleteEventUseCase:
        """Provide delete event use case."""
        return DeleteEventUseCase(
            event_service=event_service, account_service=account_service
        )

    @provide
    def get_register_for_event_use_case(
        self, event_service: EventService, account_service: AccountService
    ) -> RegisterForEventUseCase:
        """Provide register for event use case."""
        return RegisterForEventUseCase(
            event_service=event_service, account_service=account_service
        )

    @provide
    def get_unregister_from_event_use_case(
        self, event_service: EventService, account_service: AccountService
    ) -> UnregisterFromEventUseCase:
        """Provide unregister from event use case."""
        return UnregisterFromEventUseCase(
            event_service=event_service, account_service=account_service
        )

    # Staff use cases
    @provide
    def get_list_staff_use_case(
        self, staff_service: StaffService, account_service: AccountService
    ) -> ListStaffUseCase:
        """Provide list staff use case."""
        return ListStaffUseCase(
            staff_service=staff_service, account_service=account_service
        )

    @provide
    def get_get_staff_use_case(
        self, staff_service: StaffService, account_service: AccountService
    ) -> GetStaffUseCase:
        """Provide get staff use case."""
        return GetStaffUseCase(
            staff_service=staff_service, account_service=account_service
        )

    @provide
    def get_create_staff_use_case(
        self, staff_service: StaffService, account_service: AccountService
    ) -> CreateStaffUseCase:
        """Provide create staff use case."""
        return CreateStaffUseCase(
            staff_service=staff_service, account_service=account_service
        )

    @provide
    def get_update_staff_use_case(
        self, staff_service: StaffService, account_service: AccountService
    ) -> UpdateStaffUseCase:
        """Provide update staff use case."""
        return UpdateStaffUseCase(
            staff_service=staff_service, account_service=account_service
        )

    @provide
    def get_delete_staff_use_case(
        self, staff_service: StaffService, account_service: AccountService
    ) -> DeleteStaffUseCase:
        """Provide delete staff use case."""
        return DeleteStaffUseCase(
            staff_service=staff_service, account_service=account_service
        )
