"""Staff directory domain service."""

from datetime import datetime
from typing import Any
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from alumni.domain.error import AuthorizationError, NotFoundError, ValidationError
from alumni.domain.model import Account, StaffMember
from alumni.domain.repository import StaffRepository
from alumni.domain.value import Capability, StaffId

from .base import Service

EDITABLE_STAFF_FIELDS = frozenset(
    {"position", "department", "bio", "phone_number", "office_location", "is_active"}
)


class StaffService(Service):
    """Domain service for the staff directory."""

    def __init__(self, staff_repository: StaffRepository) -> None:
        """Initialize staff service.

        Args:
            staff_repository: Staff repository
        """
        self.staff_repository = staff_repository

    def ensure_can_manage(self, actor: Account) -> None:
        """Check that the actor may edit the staff directory.

        Raises:
            AuthorizationError: If the actor lacks the staff capability
        """
        if not actor.has_capability(Capability.MANAGE_STAFF):
            logfire.warn(
                "Staff management denied",
                actor_id=str(actor.id),
                role=actor.role.value,
            )
            raise AuthorizationError("Admin access required to manage staff")

    async def list_active(self) -> list[StaffMember]:
        """List visible staff entries ordered by position."""
        with logfire.span("staff_service.list_active"):
            staff = await self.staff_repository.find_active()
            logfire.info("Staff listed", count=len(staff))
            return staff

    async def get_staff(self, staff_id: StaffId) -> StaffMember:
        """Get a staff entry by ID.

        Raises:
            NotFoundError: If no entry exists
        """
        with logfire.span("staff_service.get_staff", staff_id=str(staff_id)):
            staff = await self.staff_repository.find_by_id(staff_id)
            if not staff:
                logfire.warn("Staff member not found", staff_id=str(staff_id))
                raise NotFoundError("Staff member", str(staff_id))
            return staff

    async def create_staff(
        self, actor: Account, member: Account, **fields: Any
    ) -> StaffMember:
        """List an account in the staff directory.

        An account that was removed from the directory earlier gets its
        entry back with the new details.

        Args:
            actor: Authenticated account editing the directory
            member: Account being listed
            **fields: Position and contact details

        Raises:
            AuthorizationError: If the actor may not manage staff
            ValidationError: If the account is already listed or a field is invalid
        """
        with logfire.span(
            "staff_service.create_staff",
            actor_id=str(actor.id),
            user_id=str(member.id),
        ):
            self.ensure_can_manage(actor)

            now = datetime.now()
            existing = await self.staff_repository.find_by_user(member.id)
            try:
                if existing is None:
                    staff = StaffMember(
                        id=StaffId(uuid4()),
                        user_id=member.id,
                        created_at=now,
                        updated_at=now,
                        **fields,
                    )
                elif existing.is_active:
                    logfire.warn("Already a staff member", user_id=str(member.id))
                    raise ValidationError("Account is already a staff member")
                else:
                    staff = existing.evolve(is_active=True, updated_at=now, **fields)
            except PydanticValidationError as e:
                messages = "; ".join(err["msg"] for err in e.errors())
                raise ValidationError(f"Invalid staff details: {messages}")

            saved = await self.staff_repository.save(staff)
            logfire.info(
                "Staff member listed",
                staff_id=str(saved.id),
                user_id=str(member.id),
                actor_id=str(actor.id),
                relisted=existing is not None,
            )
            return saved

    async def update_staff(
        self, staff_id: StaffId, actor: Account, changes: dict[str, Any]
    ) -> StaffMember:
        """Apply a partial update to a staff entry.

        Raises:
            AuthorizationError: If the actor may not manage staff
            NotFoundError: If no entry exists
            ValidationError: If a field is not editable or invalid
        """
        with logfire.span(
            "staff_service.update_staff",
            staff_id=str(staff_id),
            actor_id=str(actor.id),
        ):
            self.ensure_can_manage(actor)
            staff = await self.get_staff(staff_id)

            unknown = set(changes) - EDITABLE_STAFF_FIELDS
            if unknown:
                raise ValidationError(f"Fields cannot be edited: {sorted(unknown)}")

            try:
                updated = staff.evolve(**changes, updated_at=datetime.now())
            except PydanticValidationError as e:
                messages = "; ".join(err["msg"] for err in e.errors())
                raise ValidationError(f"Invalid staff details: {messages}")

            saved = await self.staff_repository.save(updated)
            logfire.info(
                "Staff member updated",
                staff_id=str(staff_id),
                actor_id=str(actor.id),
                fields=sorted(changes),
            )
            return saved

    async def remove_staff(self, staff_id: StaffId, actor: Account) -> StaffMember:
        """Hide a staff entry from the directory; the account is kept.

        Raises:
            AuthorizationError: If the actor may not manage staff
            NotFoundError: If no entry exists
        """
        with logfire.span(
            "staff_service.remove_staff",
            staff_id=str(staff_id),
            actor_id=str(actor.id),
        ):
            self.ensure_can_manage(actor)
            staff = await self.get_staff(staff_id)

            hidden = staff.evolve(is_active=False, updated_at=datetime.now())
            saved = await self.staff_repository.save(hidden)
            logfire.info(
                "Staff member removed", staff_id=str(staff_id), actor_id=str(actor.id)
            )
            return saved
