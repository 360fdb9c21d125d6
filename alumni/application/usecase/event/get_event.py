"""Get event use case."""

from pydantic import BaseModel

from alumni.application.usecase.common import parse_id
from alumni.domain.service import EventService
from alumni.domain.value import EventId

from .list_events import EventInfo


class GetEventRequest(BaseModel):
    """Get event request."""

    event_id: str


class GetEventResponse(BaseModel):
    """Get event response."""

    event: EventInfo


class GetEventUseCase:
    """Use case for reading a single event."""

    def __init__(self, event_service: EventService) -> None:
        self.event_service = event_service

    async def execute(self, request: GetEventRequest) -> GetEventResponse:
        """Get an event by ID.

        Raises:
            ValidationError: If the event ID is malformed
            NotFoundError: If the event does not exist
        """
        event_id = EventId(parse_id(request.event_id, "event"))
        event = await self.event_service.get_event(event_id)
        count = await self.event_service.count_registrations(event_id)
        return GetEventResponse(event=EventInfo.from_event(event, count))
