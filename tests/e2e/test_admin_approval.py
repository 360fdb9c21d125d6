"""End-to-end tests for the admin approval workflow."""

from tests.e2e.api import (
    MEMBER_PASSWORD,
    SUPER_ADMIN_EMAIL,
    SUPER_ADMIN_PASSWORD,
    login,
    register,
)
from tests.harness import create_client_fixture

# E2E test fixture - in-memory persistence, real app
client = create_client_fixture()

ADMIN_PASSWORD = "admin-password"


def create_admin(client, username="xena"):
    response = client.post(
        "/admin/admins",
        json={
            "username": username,
            "email": f"{username}@example.org",
            "password": ADMIN_PASSWORD,
            "first_name": "Xena",
            "last_name": "Staff",
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["account"]


def admin_login(client, email):
    return client.post("/auth/login", json={"email": email, "password": ADMIN_PASSWORD})


class TestAdminApproval:
    """End-to-end tests for admin lifecycle endpoints."""

    def test_pending_admin_approved_then_deactivated(self, client):
        """An admin signs in only between approval and deactivation."""
        # Arrange
        login(client, SUPER_ADMIN_EMAIL, SUPER_ADMIN_PASSWORD)
        admin = create_admin(client)
        admin_id = admin["account_id"]

        # Pending admins cannot sign in
        assert admin["state"] == "admin_pending"
        assert admin_login(client, "xena@example.org").status_code == 401

        # Act: approve
        login(client, SUPER_ADMIN_EMAIL, SUPER_ADMIN_PASSWORD)
        pending = client.get("/admin/pending").json()
        approved = client.post(f"/admin/accounts/{admin_id}/approve")

        # Assert
        assert [a["account_id"] for a in pending["accounts"]] == [admin_id]
        assert approved.status_code == 200
        assert approved.json()["account"]["state"] == "admin_approved"
        assert admin_login(client, "xena@example.org").status_code == 200

        dashboard = client.get("/admin/dashboard").json()
        assert dashboard["role"] == "admin"
        assert dashboard["stats"]["pending_approvals"] == 0
        assert dashboard["accounts"] is None

        # Act: deactivate kills the admin's existing session
        admin_cookie = client.cookies.get("auth_token")
        login(client, SUPER_ADMIN_EMAIL, SUPER_ADMIN_PASSWORD)
        deactivated = client.post(f"/admin/accounts/{admin_id}/deactivate")
        assert deactivated.json()["account"]["state"] == "admin_inactive"

        client.cookies.clear()
        client.cookies.set("auth_token", admin_cookie)
        assert client.get("/admin/dashboard").status_code == 401
        assert client.get("/auth/me").json()["authenticated"] is False

    def test_invalid_transition_is_409(self, client):
        login(client, SUPER_ADMIN_EMAIL, SUPER_ADMIN_PASSWORD)
        admin_id = create_admin(client)["account_id"]

        response = client.post(f"/admin/accounts/{admin_id}/deactivate")

        assert response.status_code == 409
        assert response.json()["error"] == "InvalidTransitionError"

    def test_super_admin_cannot_delete_itself(self, client):
        me = login(client, SUPER_ADMIN_EMAIL, SUPER_ADMIN_PASSWORD)

        response = client.delete(f"/admin/accounts/{me['account_id']}")

        assert response.status_code == 403

    def test_regular_user_forbidden(self, client):
        target = register(client, "yuri")
        register(client, "zane")
        login(client, "zane@example.org", MEMBER_PASSWORD)

        assert client.get("/admin/dashboard").status_code == 403
        assert client.get("/admin/accounts").status_code == 403
        response = client.post(f"/admin/accounts/{target['account_id']}/elevate")
        assert response.status_code == 403

    def test_anonymous_is_401(self, client):
        assert client.get("/admin/pending").status_code == 401

    def test_elevate_reject_and_delete(self, client):
        """A user elevated to admin can be rejected and then deleted."""
        member = register(client, "abel")
        login(client, SUPER_ADMIN_EMAIL, SUPER_ADMIN_PASSWORD)
        member_id = member["account_id"]

        elevated = client.post(f"/admin/accounts/{member_id}/elevate").json()
        rejected = client.post(f"/admin/accounts/{member_id}/reject").json()
        deleted = client.delete(f"/admin/accounts/{member_id}")

        assert elevated["account"]["state"] == "admin_pending"
        assert rejected["account"]["state"] == "admin_rejected"
        assert deleted.status_code == 200
        ids = [a["account_id"] for a in client.get("/admin/accounts").json()["accounts"]]
        assert member_id not in ids
