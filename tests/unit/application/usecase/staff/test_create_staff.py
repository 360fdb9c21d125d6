"""Unit tests for CreateStaffUseCase."""

import pytest

from alumni.application.usecase.staff import (
    CreateStaffRequest,
    CreateStaffUseCase,
    NewStaffAccount,
)
from alumni.domain.error import ValidationError
from alumni.domain.repository import AccountRepository
from alumni.domain.service import AccountService
from alumni.domain.value import ApprovalStatus, Role
from tests.conftest import make_account
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def seed(unit_env, *accounts):
    repo = await unit_env.get(AccountRepository)
    for account in accounts:
        await repo.save(account)
    return repo


def new_lecturer() -> NewStaffAccount:
    return NewStaffAccount(
        username="lecturer",
        email="lecturer@example.org",
        first_name="Lee",
        last_name="Lecturer",
    )


class TestCreateStaffUseCase:
    """Tests for listing existing and new accounts as staff."""

    @pytest.mark.asyncio
    async def test_new_account_gets_generated_password(self, unit_env):
        """The generated password signs the new account in."""
        # Arrange
        admin = make_account("admin", role=Role.ADMIN)
        await seed(unit_env, admin)
        use_case = await unit_env.get(CreateStaffUseCase)

        # Act
        response = await use_case.execute(
            CreateStaffRequest(
                actor_id=str(admin.id), new_user=new_lecturer(), position=" Lecturer "
            )
        )

        # Assert
        assert response.default_password is not None
        assert response.staff.position == "Lecturer"
        assert response.staff.user.username == "lecturer"
        account_service = await unit_env.get(AccountService)
        account = await account_service.authenticate(
            "lecturer@example.org", response.default_password
        )
        assert account.role == Role.USER
        assert account.approval_status == ApprovalStatus.APPROVED

    @pytest.mark.asyncio
    async def test_existing_account_listed_without_password(self, unit_env):
        # Arrange
        admin = make_account("admin", role=Role.ADMIN)
        member = make_account("member")
        await seed(unit_env, admin, member)
        use_case = await unit_env.get(CreateStaffUseCase)

        # Act
        response = await use_case.execute(
            CreateStaffRequest(
                actor_id=str(admin.id),
                existing_user_id=str(member.id),
                position="Librarian",
            )
        )

        # Assert
        assert response.default_password is None
        assert response.staff.user.account_id == str(member.id)

    @pytest.mark.asyncio
    async def test_exactly_one_account_source_required(self, unit_env):
        # Arrange
        admin = make_account("admin", role=Role.ADMIN)
        member = make_account("member")
        repo = await seed(unit_env, admin, member)
        use_case = await unit_env.get(CreateStaffUseCase)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateStaffRequest(actor_id=str(admin.id), position="Librarian")
            )
        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateStaffRequest(
                    actor_id=str(admin.id),
                    existing_user_id=str(member.id),
                    new_user=new_lecturer(),
                    position="Librarian",
                )
            )
        assert await repo.find_by_email("lecturer@example.org") is None
