"""Event domain service."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from alumni.domain.error import (
    AuthorizationError,
    BusinessRuleViolationError,
    NotFoundError,
    ValidationError,
)
from alumni.domain.model import Account, Event, EventRegistration
from alumni.domain.repository import EventRegistrationRepository, EventRepository
from alumni.domain.value import (
    Capability,
    EventId,
    EventRegistrationId,
    EventStatus,
)

from .base import Service

EDITABLE_EVENT_FIELDS = frozenset(
    {
        "title",
        "description",
        "start_date",
        "end_date",
        "location",
        "category",
        "featured_image",
        "is_virtual",
        "max_attendees",
        "registration_deadline",
        "status",
    }
)

CLOSED_STATUSES = frozenset({EventStatus.COMPLETED, EventStatus.CANCELLED})


def _validated(build, what: str):
    try:
        return build()
    except PydanticValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise ValidationError(f"Invalid {what}: {messages}")


class EventService(Service):
    """Domain service for community events and sign-ups."""

    def __init__(
        self,
        event_repository: EventRepository,
        registration_repository: EventRegistrationRepository,
    ) -> None:
        """Initialize event service.

        Args:
            event_repository: Event repository
            registration_repository: Event registration repository
        """
        self.event_repository = event_repository
        self.registration_repository = registration_repository

    def _require_manager(self, actor: Account) -> None:
        if not actor.has_capability(Capability.MANAGE_EVENTS):
            logfire.warn(
                "Event management denied",
                actor_id=str(actor.id),
                role=actor.role.value,
            )
            raise AuthorizationError("Admin access required to manage events")

    async def get_event(self, event_id: EventId) -> Event:
        """Get event by ID.

        Raises:
            NotFoundError: If event not found
        """
        with logfire.span("event_service.get_event", event_id=str(event_id)):
            event = await self.event_repository.find_by_id(event_id)
            if not event:
                logfire.warn("Event not found", event_id=str(event_id))
                raise NotFoundError("Event", str(event_id))
            return event

    async def list_events(self, limit: int = 10, offset: int = 0) -> list[Event]:
        """List events soonest first."""
        with logfire.span("event_service.list_events", limit=limit, offset=offset):
            events = await self.event_repository.find_all(limit=limit, offset=offset)
            logfire.info("Events listed", count=len(events))
            return events

    async def create_event(self, actor: Account, **fields: Any) -> Event:
        """Announce a new event.

        Args:
            actor: Authenticated account creating the event
            **fields: Event fields (title, description, start_date, ...)

        Returns:
            Created event

        Raises:
            AuthorizationError: If the actor may not manage events
            ValidationError: If a field is missing or out of bounds
        """
        with logfire.span("event_service.create_event", actor_id=str(actor.id)):
            self._require_manager(actor)

            now = datetime.now()
            event = _validated(
                lambda: Event(
                    id=EventId(uuid4()),
                    created_by=actor.id,
                    created_at=now,
                    updated_at=now,
                    **fields,
                ),
                "event details",
            )

            saved = await self.event_repository.save(event)
            logfire.info(
                "Event created",
                event_id=str(saved.id),
                actor_id=str(actor.id),
                start_date=saved.start_date.isoformat(),
            )
            return saved

    async def update_event(
        self, event_id: EventId, actor: Account, changes: dict[str, Any]
    ) -> Event:
        """Apply a partial update to an event.

        Raises:
            AuthorizationError: If the actor may not manage events
            NotFoundError: If the event does not exist
            ValidationError: If a field is not editable or out of bounds
        """
        with logfire.span(
            "event_service.update_event",
            event_id=str(event_id),
            actor_id=str(actor.id),
        ):
            self._require_manager(actor)
            event = await self.get_event(event_id)

            unknown = set(changes) - EDITABLE_EVENT_FIELDS
            if unknown:
                raise ValidationError(f"Fields cannot be edited: {sorted(unknown)}")

            updated = _validated(
                lambda: event.evolve(**changes, updated_at=datetime.now()),
                "event details",
            )
            saved = await self.event_repository.save(updated)
            logfire.info(
                "Event updated",
                event_id=str(event_id),
                actor_id=str(actor.id),
                fields=sorted(changes),
            )
            return saved

    async def delete_event(self, event_id: EventId, actor: Account) -> None:
        """Hard delete an event together with its registrations.

        Raises:
            AuthorizationError: If the actor may not manage events
            NotFoundError: If the event does not exist
        """
        with logfire.span(
            "event_service.delete_event",
            event_id=str(event_id),
            actor_id=str(actor.id),
        ):
            self._require_manager(actor)
            if not await self.event_repository.delete(event_id):
                logfire.warn("Event not found", event_id=str(event_id))
                raise NotFoundError("Event", str(event_id))
            logfire.info(
                "Event deleted", event_id=str(event_id), actor_id=str(actor.id)
            )

    async def register(self, event_id: EventId, account: Account) -> EventRegistration:
        """Sign an account up for an event.

        Raises:
            AuthorizationError: If the account cannot sign in
            NotFoundError: If the event does not exist
            BusinessRuleViolationError: If the account is already registered,
                the event is closed, past its deadline or full
        """
        with logfire.span(
            "event_service.register",
            event_id=str(event_id),
            account_id=str(account.id),
        ):
            if not account.can_sign_in:
                raise AuthorizationError("Account cannot register for events")

            event = await self.get_event(event_id)
            existing = await self.registration_repository.find_by_event_and_user(
                event_id, account.id
            )
            if existing:
                logfire.warn(
                    "Already registered",
                    event_id=str(event_id),
                    account_id=str(account.id),
                )
                raise BusinessRuleViolationError("Already registered for this event")

            now = datetime.now()
            if event.status in CLOSED_STATUSES:
                raise BusinessRuleViolationError(
                    f"Registration is closed for {event.status.value} events"
                )
            if event.registration_deadline and now > event.registration_deadline:
                raise BusinessRuleViolationError("Registration deadline has passed")
            if event.max_attendees is not None:
                taken = await self.registration_repository.count_by_event(event_id)
                if taken >= event.max_attendees:
                    logfire.warn("Event is full", event_id=str(event_id))
                    raise BusinessRuleViolationError("Event is full")

            registration = EventRegistration(
                id=EventRegistrationId(uuid4()),
                event_id=event_id,
                user_id=account.id,
                registered_at=now,
            )
            saved = await self.registration_repository.save(registration)
            logfire.info(
                "Registered for event",
                event_id=str(event_id),
                account_id=str(account.id),
            )
            return saved

    async def unregister(self, event_id: EventId, account: Account) -> None:
        """Cancel an account's registration for an event.

        Raises:
            NotFoundError: If the event does not exist
            BusinessRuleViolationError: If the account is not registered
        """
        with logfire.span(
            "event_service.unregister",
            event_id=str(event_id),
            account_id=str(account.id),
        ):
            await self.get_event(event_id)
            registration = await self.registration_repository.find_by_event_and_user(
                event_id, account.id
            )
            if registration is None or not await self.registration_repository.delete(
                registration.id
            ):
                logfire.warn(
                    "Not registered",
                    event_id=str(event_id),
                    account_id=str(account.id),
                )
                raise BusinessRuleViolationError("Not registered for this event")

            logfire.info(
                "Unregistered from event",
                event_id=str(event_id),
                account_id=str(account.id),
            )

    async def count_registrations(self, event_id: EventId) -> int:
        """Count sign-ups for an event."""
        return await self.registration_repository.count_by_event(event_id)

    async def is_registered(self, event_id: EventId, account: Account) -> bool:
        """Check whether an account is signed up for an event."""
        registration = await self.registration_repository.find_by_event_and_user(
            event_id, account.id
        )
        return registration is not None
