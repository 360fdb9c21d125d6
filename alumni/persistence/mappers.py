"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from alumni.domain.model import (
    Account,
    Comment,
    Event,
    EventRegistration,
    Post,
    PostLike,
    StaffMember,
)
from alumni.domain.value import (
    AccountId,
    ApprovalStatus,
    CommentId,
    EventId,
    EventRegistrationId,
    EventStatus,
    PostId,
    PostLikeId,
    PostStatus,
    Role,
    StaffId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_account(row: Dict[str, Any]) -> Account:
    """Convert database row to Account domain model.

    Args:
        row: Database row as dict

    Returns:
        Account domain model
    """
    return Account(
        id=AccountId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=row["email"],
        password_hash=row["password_hash"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        graduation_year=row.get("graduation_year"),
        bio=row.get("bio"),
        profile_image=row.get("profile_image"),
        role=Role(row["role"]),
        approval_status=ApprovalStatus(row["approval_status"]),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def account_to_dict(account: Account) -> Dict[str, Any]:
    """Convert Account domain model to database dict.

    Args:
        account: Account domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = account.model_dump(exclude={"is_approved"})
    data["role"] = account.role.value
    data["approval_status"] = account.approval_status.value
    return data


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        content=row["content"],
        excerpt=row.get("excerpt") or "",
        author_id=AccountId(_uuid(row["author_id"])),
        category=row["category"],
        status=PostStatus(row["status"]),
        tags=list(row.get("tags") or []),
        featured_image=row.get("featured_image"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict."""
    data = post.model_dump()
    data["status"] = post.status.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        content=row["content"],
        author_id=AccountId(_uuid(row["author_id"])) if row.get("author_id") else None,
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_post_like(row: Dict[str, Any]) -> PostLike:
    """Convert database row to PostLike domain model."""
    return PostLike(
        id=PostLikeId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        liker_key=row["liker_key"],
        created_at=row["created_at"],
    )


def post_like_to_dict(like: PostLike) -> Dict[str, Any]:
    """Convert PostLike domain model to database dict."""
    return like.model_dump()


def row_to_event(row: Dict[str, Any]) -> Event:
    """Convert database row to Event domain model.

    Args:
        row: Database row as dict

    Returns:
        Event domain model
    """
    return Event(
        id=EventId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        start_date=row["start_date"],
        end_date=row.get("end_date"),
        location=row["location"],
        category=row["category"],
        featured_image=row.get("featured_image"),
        is_virtual=row["is_virtual"],
        max_attendees=row.get("max_attendees"),
        registration_deadline=row.get("registration_deadline"),
        status=EventStatus(row["status"]),
        created_by=(
            AccountId(_uuid(row["created_by"])) if row.get("created_by") else None
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def event_to_dict(event: Event) -> Dict[str, Any]:
    """Convert Event domain model to database dict."""
    data = event.model_dump()
    data["status"] = event.status.value
    return data


def row_to_event_registration(row: Dict[str, Any]) -> EventRegistration:
    """Convert database row to EventRegistration domain model."""
    return EventRegistration(
        id=EventRegistrationId(_uuid(row["id"])),
        event_id=EventId(_uuid(row["event_id"])),
        user_id=AccountId(_uuid(row["user_id"])),
        registered_at=row["registered_at"],
    )


def event_registration_to_dict(registration: EventRegistration) -> Dict[str, Any]:
    """Convert EventRegistration domain model to database dict."""
    return registration.model_dump()


def row_to_staff(row: Dict[str, Any]) -> StaffMember:
    """Convert database row to StaffMember domain model."""
    return StaffMember(
        id=StaffId(_uuid(row["id"])),
        user_id=AccountId(_uuid(row["user_id"])),
        position=row["position"],
        department=row.get("department"),
        bio=row.get("bio"),
        phone_number=row.get("phone_number"),
        office_location=row.get("office_location"),
        is_active=row["is_active"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def staff_to_dict(staff: StaffMember) -> Dict[str, Any]:
    """Convert StaffMember domain model to database dict."""
    return staff.model_dump()
