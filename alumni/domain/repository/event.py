"""Event repository interfaces."""

from abc import ABC, abstractmethod
from typing import List, Optional

from alumni.domain.model.event import Event, EventRegistration
from alumni.domain.value import AccountId, EventId, EventRegistrationId


class EventRepository(ABC):
    """Repository for Event aggregate."""

    @abstractmethod
    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID.

        Args:
            event_id: The event's unique identifier

        Returns:
            The event if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 10, offset: int = 0) -> List[Event]:
        """Find events ordered by start date, soonest first.

        Args:
            limit: Maximum number of events to return
            offset: Number of events to skip
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all events."""
        pass

    @abstractmethod
    async def save(self, event: Event) -> Event:
        """Save an event (create or update)."""
        pass

    @abstractmethod
    async def delete(self, event_id: EventId) -> bool:
        """Hard delete an event and its registrations.

        Returns:
            True if an event was removed
        """
        pass


class EventRegistrationRepository(ABC):
    """Repository for event sign-ups."""

    @abstractmethod
    async def find_by_event_and_user(
        self, event_id: EventId, user_id: AccountId
    ) -> Optional[EventRegistration]:
        """Find an account's registration for an event."""
        pass

    @abstractmethod
    async def save(self, registration: EventRegistration) -> EventRegistration:
        """Insert a registration.

        Raises:
            ConflictError: If the account is already registered for the event
        """
        pass

    @abstractmethod
    async def delete(self, registration_id: EventRegistrationId) -> bool:
        """Remove a registration.

        Returns:
            True if a registration was removed
        """
        pass

    @abstractmethod
    async def count_by_event(self, event_id: EventId) -> int:
        """Count registrations for an event."""
        pass
