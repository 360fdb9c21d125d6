"""Unit tests for domain error to HTTP status mapping."""

import pytest

from alumni.domain.error import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleViolationError,
    ConflictError,
    InvalidTransitionError,
    NotFoundError,
    ProtectedAccountError,
    ValidationError,
)
from alumni.interface.error import status_for_error


class TestStatusForError:
    """Tests for status_for_error."""

    @pytest.mark.parametrize(
        "error,expected",
        [
            (ValidationError("bad"), 400),
            (AuthenticationError("who"), 401),
            (AuthorizationError("no"), 403),
            (ProtectedAccountError("id", "super admin accounts"), 403),
            (NotFoundError("Post", "id"), 404),
            (InvalidTransitionError("approve", "user_active"), 409),
            (ConflictError("Account", "id"), 409),
            (BusinessRuleViolationError("rule"), 400),
        ],
    )
    def test_mapping(self, error, expected):
        assert status_for_error(error) == expected
