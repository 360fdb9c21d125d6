"""Event use cases."""

from .get_event import GetEventRequest, GetEventResponse, GetEventUseCase
from .list_events import (
    EventInfo,
    ListEventsRequest,
    ListEventsResponse,
    ListEventsUseCase,
)
from .manage_event import (
    CreateEventRequest,
    CreateEventUseCase,
    DeleteEventRequest,
    DeleteEventResponse,
    DeleteEventUseCase,
    EventFields,
    EventResponse,
    UpdateEventRequest,
    UpdateEventUseCase,
)
from .register_event import (
    EventRegistrationRequest,
    EventRegistrationResponse,
    RegisterForEventUseCase,
    UnregisterFromEventUseCase,
)

__all__ = [
    "CreateEventRequest",
    "CreateEventUseCase",
    "DeleteEventRequest",
    "DeleteEventResponse",
    "DeleteEventUseCase",
    "EventFields",
    "EventInfo",
    "EventRegistrationRequest",
    "EventRegistrationResponse",
    "EventResponse",
    "GetEventRequest",
    "GetEventResponse",
    "GetEventUseCase",
    "ListEventsRequest",
    "ListEventsResponse",
    "ListEventsUseCase",
    "RegisterForEventUseCase",
    "UnregisterFromEventUseCase",
    "UpdateEventRequest",
    "UpdateEventUseCase",
]
