"""In-memory event repositories for testing."""

from typing import Optional

from alumni.domain.error import ConflictError
from alumni.domain.model.event import Event, EventRegistration
from alumni.domain.repository.event import (
    EventRegistrationRepository,
    EventRepository,
)
from alumni.domain.value import AccountId, EventId, EventRegistrationId

from .store import InMemoryStore


class InMemoryEventRepository(EventRepository):
    """In-memory implementation of EventRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._store = store or InMemoryStore()
        self._events = self._store.events

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID."""
        return self._events.get(event_id)

    async def find_all(self, limit: int = 10, offset: int = 0) -> list[Event]:
        """Find events soonest first with pagination."""
        events = sorted(self._events.values(), key=lambda e: e.start_date)
        return events[offset : offset + limit]

    async def count(self) -> int:
        """Count all events."""
        return len(self._events)

    async def save(self, event: Event) -> Event:
        """Save or update an event."""
        self._events[event.id] = event
        return event

    async def delete(self, event_id: EventId) -> bool:
        """Hard delete an event with its registrations."""
        return self._store.delete_event(event_id)


class InMemoryEventRegistrationRepository(EventRegistrationRepository):
    """In-memory implementation of EventRegistrationRepository for testing."""

    def __init__(self, store: Optional[InMemoryStore] = None) -> None:
        self._registrations = (store or InMemoryStore()).registrations

    async def find_by_event_and_user(
        self, event_id: EventId, user_id: AccountId
    ) -> Optional[EventRegistration]:
        """Find an account's registration for an event."""
        for registration in self._registrations.values():
            if registration.event_id == event_id and registration.user_id == user_id:
                return registration
        return None

    async def save(self, registration: EventRegistration) -> EventRegistration:
        """Insert a registration, enforcing one per account and event."""
        existing = await self.find_by_event_and_user(
            registration.event_id, registration.user_id
        )
        if existing is not None and existing.id != registration.id:
            raise ConflictError("EventRegistration", str(registration.event_id))
        self._registrations[registration.id] = registration
        return registration

    async def delete(self, registration_id: EventRegistrationId) -> bool:
        """Remove a registration."""
        return self._registrations.pop(registration_id, None) is not None

    async def count_by_event(self, event_id: EventId) -> int:
        """Count registrations for an event."""
        return sum(1 for r in self._registrations.values() if r.event_id == event_id)
