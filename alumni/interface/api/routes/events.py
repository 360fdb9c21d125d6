"""Event routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel, Field

from alumni.application.usecase.event import (
    CreateEventRequest,
    CreateEventUseCase,
    DeleteEventRequest,
    DeleteEventResponse,
    DeleteEventUseCase,
    EventFields,
    EventRegistrationRequest,
    EventRegistrationResponse,
    EventResponse,
    GetEventRequest,
    GetEventResponse,
    GetEventUseCase,
    ListEventsRequest,
    ListEventsResponse,
    ListEventsUseCase,
    RegisterForEventUseCase,
    UnregisterFromEventUseCase,
    UpdateEventRequest,
    UpdateEventUseCase,
)
from alumni.domain.service import JWTService
from alumni.domain.value import EventStatus
from alumni.interface.api.session import require_account_id

router = APIRouter(prefix="/events", tags=["events"], route_class=DishkaRoute)


class CreateEventAPIRequest(EventFields):
    """API request for announcing an event."""

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    location: str = Field(min_length=1, max_length=255)
    category: str = Field(min_length=1, max_length=100)
    max_attendees: int | None = Field(default=None, gt=0)


class UpdateEventAPIRequest(BaseModel):
    """API request for editing an event. Omitted fields are left unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, min_length=1)
    start_date: datetime | None = None
    end_date: datetime | None = None
    location: str | None = Field(default=None, min_length=1, max_length=255)
    category: str | None = Field(default=None, min_length=1, max_length=100)
    featured_image: str | None = None
    is_virtual: bool | None = None
    max_attendees: int | None = Field(default=None, gt=0)
    registration_deadline: datetime | None = None
    status: EventStatus | None = None


@router.get("", response_model=ListEventsResponse)
async def list_events(
    list_events_use_case: FromDishka[ListEventsUseCase],
    limit: int = Query(default=10, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListEventsResponse:
    """List events, soonest first, with registration counts."""
    return await list_events_use_case.execute(
        ListEventsRequest(limit=limit, offset=offset)
    )


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    request: CreateEventAPIRequest,
    create_event_use_case: FromDishka[CreateEventUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> EventResponse:
    """Announce an event. Requires an admin."""
    account_id = require_account_id(jwt_service, auth_token)
    return await create_event_use_case.execute(
        CreateEventRequest(actor_id=account_id, **request.model_dump())
    )


@router.get("/{event_id}", response_model=GetEventResponse)
async def get_event(
    event_id: str,
    get_event_use_case: FromDishka[GetEventUseCase],
) -> GetEventResponse:
    """Get an event with its registration count."""
    return await get_event_use_case.execute(GetEventRequest(event_id=event_id))


@router.put("/{event_id}", response_model=EventResponse)
async def update_event(
    event_id: str,
    request: UpdateEventAPIRequest,
    update_event_use_case: FromDishka[UpdateEventUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> EventResponse:
    """Edit an event. Requires an admin."""
    account_id = require_account_id(jwt_service, auth_token)
    return await update_event_use_case.execute(
        UpdateEventRequest(
            event_id=event_id,
            actor_id=account_id,
            changes=request.model_dump(exclude_unset=True),
        )
    )


@router.delete("/{event_id}", response_model=DeleteEventResponse)
async def delete_event(
    event_id: str,
    delete_event_use_case: FromDishka[DeleteEventUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> DeleteEventResponse:
    """Delete an event and its registrations. Requires an admin."""
    account_id = require_account_id(jwt_service, auth_token)
    return await delete_event_use_case.execute(
        DeleteEventRequest(event_id=event_id, actor_id=account_id)
    )


@router.post("/{event_id}/register", response_model=EventRegistrationResponse)
async def register_for_event(
    event_id: str,
    register_use_case: FromDishka[RegisterForEventUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> EventRegistrationResponse:
    """Sign the current account up for an event."""
    account_id = require_account_id(jwt_service, auth_token)
    return await register_use_case.execute(
        EventRegistrationRequest(event_id=event_id, account_id=account_id)
    )


@router.delete("/{event_id}/register", response_model=EventRegistrationResponse)
async def unregister_from_event(
    event_id: str,
    unregister_use_case: FromDishka[UnregisterFromEventUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> EventRegistrationResponse:
    """Cancel the current account's sign-up."""
    account_id = require_account_id(jwt_service, auth_token)
    return await unregister_use_case.execute(
        EventRegistrationRequest(event_id=event_id, account_id=account_id)
    )
