"""Unit tests for StaffService."""

from uuid import uuid4

import pytest

from alumni.domain.error import AuthorizationError, NotFoundError, ValidationError
from alumni.domain.service import StaffService
from alumni.domain.value import Role, StaffId
from tests.conftest import make_account
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestStaffDirectory:
    """Tests for listing and removing staff entries."""

    @pytest.mark.asyncio
    async def test_create_and_list_by_position(self, unit_env):
        # Arrange
        service = await unit_env.get(StaffService)
        admin = make_account("admin", role=Role.ADMIN)
        registrar = make_account("registrar")
        dean = make_account("dean")

        # Act
        second = await service.create_staff(admin, registrar, position="Registrar")
        first = await service.create_staff(
            admin, dean, position="Dean", department="Science"
        )

        # Assert
        assert first.user_id == dean.id
        assert first.department == "Science"
        assert first.is_active is True
        assert [s.id for s in await service.list_active()] == [first.id, second.id]

    @pytest.mark.asyncio
    async def test_members_cannot_manage_staff(self, unit_env):
        service = await unit_env.get(StaffService)
        member = make_account("member")

        with pytest.raises(AuthorizationError):
            await service.create_staff(member, member, position="Dean")

    @pytest.mark.asyncio
    async def test_active_entry_cannot_be_created_twice(self, unit_env):
        service = await unit_env.get(StaffService)
        admin = make_account("admin", role=Role.ADMIN)
        dean = make_account("dean")
        await service.create_staff(admin, dean, position="Dean")

        with pytest.raises(ValidationError):
            await service.create_staff(admin, dean, position="Dean")

    @pytest.mark.asyncio
    async def test_remove_hides_entry_and_relisting_restores_it(self, unit_env):
        """Removal is soft; listing the account again reuses its entry."""
        # Arrange
        service = await unit_env.get(StaffService)
        admin = make_account("admin", role=Role.ADMIN)
        dean = make_account("dean")
        entry = await service.create_staff(admin, dean, position="Dean")

        # Act
        hidden = await service.remove_staff(entry.id, admin)

        # Assert
        assert hidden.is_active is False
        assert await service.list_active() == []
        assert (await service.get_staff(entry.id)).is_active is False

        relisted = await service.create_staff(admin, dean, position="Provost")
        assert relisted.id == entry.id
        assert relisted.position == "Provost"
        assert relisted.is_active is True

    @pytest.mark.asyncio
    async def test_update_checks_fields(self, unit_env):
        # Arrange
        service = await unit_env.get(StaffService)
        admin = make_account("admin", role=Role.ADMIN)
        entry = await service.create_staff(admin, make_account("dean"), position="Dean")

        # Act
        updated = await service.update_staff(
            entry.id, admin, {"office_location": "Room 101"}
        )

        # Assert
        assert updated.office_location == "Room 101"
        assert updated.position == "Dean"
        with pytest.raises(ValidationError):
            await service.update_staff(entry.id, admin, {"user_id": uuid4()})
        with pytest.raises(ValidationError):
            await service.update_staff(entry.id, admin, {"position": ""})

    @pytest.mark.asyncio
    async def test_unknown_entry(self, unit_env):
        service = await unit_env.get(StaffService)
        admin = make_account("admin", role=Role.ADMIN)

        with pytest.raises(NotFoundError):
            await service.remove_staff(StaffId(uuid4()), admin)
