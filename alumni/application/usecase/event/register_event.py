"""Event sign-up use cases."""

import logfire
from pydantic import BaseModel

from alumni.application.usecase.common import parse_id, resolve_actor
from alumni.domain.service import AccountService, EventService
from alumni.domain.value import EventId


class EventRegistrationRequest(BaseModel):
    """Register or unregister request."""

    event_id: str
    account_id: str  # From the session token


class EventRegistrationResponse(BaseModel):
    """Sign-up state after the request."""

    event_id: str
    registered: bool
    registration_count: int


class _RegistrationUseCase:
    def __init__(
        self, event_service: EventService, account_service: AccountService
    ) -> None:
        self.event_service = event_service
        self.account_service = account_service

    async def _response(
        self, event_id: EventId, registered: bool
    ) -> EventRegistrationResponse:
        return EventRegistrationResponse(
            event_id=str(event_id),
            registered=registered,
            registration_count=await self.event_service.count_registrations(event_id),
        )


class RegisterForEventUseCase(_RegistrationUseCase):
    """Use case for signing up for an event."""

    async def execute(
        self, request: EventRegistrationRequest
    ) -> EventRegistrationResponse:
        """Register the signed-in account.

        Raises:
            AuthenticationError: If the session account can no longer sign in
            NotFoundError: If the event does not exist
            BusinessRuleViolationError: If already registered or registration
                is closed
            ConflictError: If a concurrent request registered first
        """
        event_id = EventId(parse_id(request.event_id, "event"))
        account = await resolve_actor(self.account_service, request.account_id)

        with logfire.span("register_for_event.execute", event_id=str(event_id)):
            await self.event_service.register(event_id, account)
            return await self._response(event_id, registered=True)


class UnregisterFromEventUseCase(_RegistrationUseCase):
    """Use case for cancelling a sign-up."""

    async def execute(
        self, request: EventRegistrationRequest
    ) -> EventRegistrationResponse:
        """Unregister the signed-in account.

        Raises:
            AuthenticationError: If the session account can no longer sign in
            NotFoundError: If the event does not exist
            BusinessRuleViolationError: If the account was not registered
        """
        event_id = EventId(parse_id(request.event_id, "event"))
        account = await resolve_actor(self.account_service, request.account_id)

        with logfire.span("unregister_from_event.execute", event_id=str(event_id)):
            await self.event_service.unregister(event_id, account)
            return await self._response(event_id, registered=False)
