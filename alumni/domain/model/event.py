"""Event aggregate root.

Events are reunions, talks and meetups announced to the community. Members
sign up through an ``EventRegistration``.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from alumni.domain.model.common import DomainModel
from alumni.domain.value import AccountId, EventId, EventRegistrationId, EventStatus


class Event(DomainModel):
    """Community event aggregate root."""

    id: EventId
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1)
    start_date: datetime
    end_date: Optional[datetime] = None
    location: str = Field(min_length=1, max_length=255)
    category: str = Field(min_length=1, max_length=100)
    featured_image: Optional[str] = None
    is_virtual: bool = False
    max_attendees: Optional[int] = Field(default=None, gt=0)
    registration_deadline: Optional[datetime] = None
    status: EventStatus = EventStatus.UPCOMING
    created_by: Optional[AccountId] = None  # None once the creator is deleted
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def check_dates(self) -> "Event":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class EventRegistration(DomainModel):
    """One account's sign-up for an event."""

    id: EventRegistrationId
    event_id: EventId
    user_id: AccountId
    registered_at: datetime = Field(default_factory=datetime.now)
