"""List events use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from alumni.domain.model import Event
from alumni.domain.service import EventService
from alumni.domain.value import EventStatus


class EventInfo(BaseModel):
    """Event details in responses."""

    event_id: str
    title: str
    description: str
    start_date: datetime
    end_date: datetime | None
    location: str
    category: str
    featured_image: str | None
    is_virtual: bool
    max_attendees: int | None
    registration_deadline: datetime | None
    status: EventStatus
    created_by: str | None
    registration_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_event(cls, event: Event, registration_count: int) -> "EventInfo":
        return cls(
            event_id=str(event.id),
            title=event.title,
            description=event.description,
            start_date=event.start_date,
            end_date=event.end_date,
            location=event.location,
            category=event.category,
            featured_image=event.featured_image,
            is_virtual=event.is_virtual,
            max_attendees=event.max_attendees,
            registration_deadline=event.registration_deadline,
            status=event.status,
            created_by=str(event.created_by) if event.created_by else None,
            registration_count=registration_count,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )


class ListEventsRequest(BaseModel):
    """List events request."""

    limit: int = Field(default=10, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListEventsResponse(BaseModel):
    """List events response."""

    events: list[EventInfo]
    limit: int
    offset: int


class ListEventsUseCase:
    """Use case for the events calendar, soonest first."""

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: ListEventsRequest) -> ListEventsResponse:
        """List events with their registration counts."""
        with logfire.span(
            "list_events.execute", limit=request.limit, offset=request.offset
        ):
            events = await self.event_service.list_events(
                limit=request.limit, offset=request.offset
            )
            return ListEventsResponse(
                events=[
                    EventInfo.from_event(
                        event, await self.event_service.count_registrations(event.id)
                    )
                    for event in events
                ],
                limit=request.limit,
                offset=request.offset,
            )
