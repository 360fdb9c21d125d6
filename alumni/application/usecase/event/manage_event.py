"""Event management use cases for admins."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from alumni.application.usecase.common import parse_id, resolve_actor
from alumni.domain.service import AccountService, EventService
from alumni.domain.value import EventId, EventStatus

from .list_events import EventInfo


class EventFields(BaseModel):
    """Fields supplied when announcing an event."""

    title: str
    description: str
    start_date: datetime
    end_date: datetime | None = None
    location: str
    category: str
    featured_image: str | None = None
    is_virtual: bool = False
    max_attendees: int | None = None
    registration_deadline: datetime | None = None
    status: EventStatus = EventStatus.UPCOMING


class CreateEventRequest(EventFields):
    """Create event request."""

    actor_id: str  # From the session token


class UpdateEventRequest(BaseModel):
    """Update event request."""

    event_id: str
    actor_id: str  # From the session token
    changes: dict[str, Any] = Field(default_factory=dict)


class DeleteEventRequest(BaseModel):
    """Delete event request."""

    event_id: str
    actor_id: str  # From the session token


class EventResponse(BaseModel):
    """Event after the change."""

    event: EventInfo


class DeleteEventResponse(BaseModel):
    """Delete event response."""

    event_id: str


class CreateEventUseCase:
    """Use case for announcing an event."""

    def __init__(
        self, event_service: EventService, account_service: AccountService
    ) -> None:
        """Initialize create event use case.

        Args:
            event_service: Event domain service
            account_service: Account domain service
        """
        self.event_service = event_service
        self.account_service = account_service

    async def execute(self, request: CreateEventRequest) -> EventResponse:
        """Create an event.

        Raises:
            AuthenticationError: If the session account can no longer sign in
            AuthorizationError: If the actor may not manage events
            ValidationError: If a field is out of bounds
        """
        actor = await resolve_actor(self.account_service, request.actor_id)
        fields = request.model_dump(exclude={"actor_id"})
        for name in ("title", "description", "location", "category"):
            fields[name] = fields[name].strip()

        event = await self.event_service.create_event(actor, **fields)
        return EventResponse(event=EventInfo.from_event(event, 0))


class UpdateEventUseCase:
    """Use case for editing an event."""

    def __init__(
        self, event_service: EventService, account_service: AccountService
    ) -> None:
        self.event_service = event_service
        self.account_service = account_service

    async def execute(self, request: UpdateEventRequest) -> EventResponse:
        """Apply the provided fields to the event.

        Raises:
            AuthenticationError: If the session account can no longer sign in
            AuthorizationError: If the actor may not manage events
            NotFoundError: If the event does not exist
            ValidationError: If a field is out of bounds
        """
        event_id = EventId(parse_id(request.event_id, "event"))
        actor = await resolve_actor(self.account_service, request.actor_id)

        event = await self.event_service.update_event(
            event_id, actor, request.changes
        )
        count = await self.event_service.count_registrations(event_id)
        return EventResponse(event=EventInfo.from_event(event, count))


class DeleteEventUseCase:
    """Use case for removing an event and its sign-ups."""

    def __init__(
        self, event_service: EventService, account_service: AccountService
    ) -> None:
        self.event_service = event_service
        self.account_service = account_service

    async def execute(self, request: DeleteEventRequest) -> DeleteEventResponse:
        """Delete an event.

        Raises:
            AuthenticationError: If the session account can no longer sign in
            AuthorizationError: If the actor may not manage events
            NotFoundError: If the event does not exist
        """
        event_id = EventId(parse_id(request.event_id, "event"))
        actor = await resolve_actor(self.account_service, request.actor_id)

        await self.event_service.delete_event(event_id, actor)
        return DeleteEventResponse(event_id=str(event_id))
