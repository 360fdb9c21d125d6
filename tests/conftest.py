"""Test configuration and fixtures."""

import os
from datetime import datetime
from uuid import uuid4

import logfire

# Settings are read from the environment when the container resolves them
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("BOOTSTRAP__SUPER_ADMIN_PASSWORD", "super-secret-pw")

logfire.configure(send_to_logfire=False, console=False)

from alumni.config import AuthSettings  # noqa: E402
from alumni.domain.model import Account, Comment  # noqa: E402
from alumni.domain.value import (  # noqa: E402
    AccountId,
    ApprovalStatus,
    CommentId,
    PostId,
    Role,
    Username,
)
from alumni.util.password import hash_password  # noqa: E402

TEST_PASSWORD = "correct-horse"


def make_account(
    username: str = "alice",
    role: Role = Role.USER,
    approval_status: ApprovalStatus = ApprovalStatus.APPROVED,
    is_active: bool = True,
    password: str = TEST_PASSWORD,
    created_at: datetime | None = None,
) -> Account:
    """Helper function to build accounts for tests.

    Args:
        username: Username (email is derived from it)
        role: Account role
        approval_status: Approval status
        is_active: Activity flag
        password: Plain text password to hash
        created_at: Creation time (defaults to now)

    Returns:
        Account entity, not yet saved
    """
    now = created_at or datetime.now()
    return Account(
        id=AccountId(uuid4()),
        username=Username(username),
        email=f"{username}@example.org",
        password_hash=hash_password(password, AuthSettings(bcrypt_rounds=4)),
        first_name=username.capitalize(),
        last_name="Tester",
        role=role,
        approval_status=approval_status,
        is_active=is_active,
        created_at=now,
        updated_at=now,
    )


def make_comment(
    post_id: PostId,
    created_at: datetime,
    parent_id: CommentId | None = None,
    content: str = "A comment",
    comment_id: CommentId | None = None,
) -> Comment:
    """Helper function to build comments for tests."""
    return Comment(
        id=comment_id or CommentId(uuid4()),
        post_id=post_id,
        content=content,
        parent_id=parent_id,
        created_at=created_at,
    )
