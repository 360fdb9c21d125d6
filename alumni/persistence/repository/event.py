"""PostgreSQL implementation of Event repositories."""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from alumni.domain.error import ConflictError
from alumni.domain.model import Event, EventRegistration
from alumni.domain.repository import EventRegistrationRepository, EventRepository
from alumni.domain.value import AccountId, EventId, EventRegistrationId
from alumni.persistence.mappers import (
    event_registration_to_dict,
    event_to_dict,
    row_to_event,
    row_to_event_registration,
)
from alumni.persistence.tables import event_registrations_table, events_table


class PostgresEventRepository(EventRepository):
    """PostgreSQL implementation of EventRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID."""
        stmt = select(events_table).where(events_table.c.id == event_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_event(dict(row)) if row else None

    async def find_all(self, limit: int = 10, offset: int = 0) -> List[Event]:
        """Find events soonest first with pagination."""
        stmt = (
            select(events_table)
            .order_by(events_table.c.start_date.asc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_event(dict(row)) for row in result.mappings()]

    async def count(self) -> int:
        """Count all events."""
        result = await self.session.execute(
            select(func.count()).select_from(events_table)
        )
        return result.scalar_one()

    async def save(self, event: Event) -> Event:
        """Save an event (create or update)."""
        existing = await self.find_by_id(event.id)

        event_dict = event_to_dict(event)

        if existing:
            stmt = (
                events_table.update()
                .where(events_table.c.id == event.id)
                .values(**event_dict)
            )
        else:
            stmt = events_table.insert().values(**event_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return event

    async def delete(self, event_id: EventId) -> bool:
        """Hard delete an event; registrations cascade in the database."""
        stmt = (
            events_table.delete()
            .where(events_table.c.id == event_id)
            .returning(events_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.first() is not None
        await self.session.flush()
        return deleted


class PostgresEventRegistrationRepository(EventRegistrationRepository):
    """PostgreSQL implementation of EventRegistrationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_event_and_user(
        self, event_id: EventId, user_id: AccountId
    ) -> Optional[EventRegistration]:
        """Find an account's registration for an event."""
        stmt = select(event_registrations_table).where(
            event_registrations_table.c.event_id == event_id,
            event_registrations_table.c.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_event_registration(dict(row)) if row else None

    async def save(self, registration: EventRegistration) -> EventRegistration:
        """Insert a registration.

        A concurrent duplicate hits the unique constraint and inserts nothing.
        """
        stmt = (
            insert(event_registrations_table)
            .values(**event_registration_to_dict(registration))
            .on_conflict_do_nothing(constraint="uq_event_registration")
            .returning(event_registrations_table.c.id)
        )
        result = await self.session.execute(stmt)
        if result.first() is None:
            raise ConflictError("EventRegistration", str(registration.event_id))
        await self.session.flush()
        return registration

    async def delete(self, registration_id: EventRegistrationId) -> bool:
        """Remove a registration."""
        stmt = (
            event_registrations_table.delete()
            .where(event_registrations_table.c.id == registration_id)
            .returning(event_registrations_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = result.first() is not None
        await self.session.flush()
        return deleted

    async def count_by_event(self, event_id: EventId) -> int:
        """Count registrations for an event."""
        stmt = (
            select(func.count())
            .select_from(event_registrations_table)
            .where(event_registrations_table.c.event_id == event_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
