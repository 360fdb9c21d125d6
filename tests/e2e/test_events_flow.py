"""End-to-end tests for events and registrations."""

from datetime import datetime, timedelta
from uuid import uuid4

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


def create_event(client, title="Homecoming", **fields):
    login(client, SUPER_ADMIN_EMAIL, SUPER_ADMIN_PASSWORD)
    body = {
        "title": title,
        "description": "Alumni weekend on campus.",
        "start_date": (datetime.now() + timedelta(days=14)).isoformat(),
        "location": "Main quad",
        "category": "reunion",
    }
    body.update(fields)
    response = client.post("/events", json=body)
    assert response.status_code == 201, response.text
    return response.json()["event"]


class TestEventManagement:
    """End-to-end tests for admin event endpoints."""

    def test_create_update_delete(self, client):
        # Arrange
        event = create_event(client)
        event_id = event["event_id"]

        # Act
        updated = client.put(f"/events/{event_id}", json={"location": "Gym"})
        listed = client.get("/events").json()
        deleted = client.delete(f"/events/{event_id}")

        # Assert
        assert event["status"] == "upcoming"
        assert event["registration_count"] == 0
        assert updated.status_code == 200
        assert updated.json()["event"]["location"] == "Gym"
        assert updated.json()["event"]["title"] == "Homecoming"
        assert [e["event_id"] for e in listed["events"]] == [event_id]
        assert deleted.json() == {"event_id": event_id}
        assert client.get(f"/events/{event_id}").status_code == 404

    def test_members_cannot_manage_events(self, client):
        event = create_event(client)
        register(client, "mia")
        login(client, "mia@example.org", MEMBER_PASSWORD)

        body = {k: v for k, v in event.items() if k in ("title", "description")}
        body.update(
            start_date=event["start_date"], location="Hall", category="reunion"
        )

        assert client.post("/events", json=body).status_code == 403
        assert (
            client.put(f"/events/{event['event_id']}", json={"title": "x"}).status_code
            == 403
        )
        assert client.delete(f"/events/{event['event_id']}").status_code == 403

    def test_anonymous_cannot_create(self, client):
        response = client.post(
            "/events",
            json={
                "title": "t",
                "description": "d",
                "start_date": datetime.now().isoformat(),
                "location": "l",
                "category": "c",
            },
        )

        assert response.status_code == 401

    def test_unknown_and_malformed_event(self, client):
        assert client.get(f"/events/{uuid4()}").status_code == 404
        assert client.get("/events/not-a-uuid").status_code == 400


class TestEventRegistration:
    """End-to-end tests for signing up to events."""

    def test_register_and_unregister(self, client):
        # Arrange
        event = create_event(client)
        event_id = event["event_id"]
        register(client, "noah")
        login(client, "noah@example.org", MEMBER_PASSWORD)

        # Act
        signed_up = client.post(f"/events/{event_id}/register")
        again = client.post(f"/events/{event_id}/register")
        fetched = client.get(f"/events/{event_id}").json()
        cancelled = client.delete(f"/events/{event_id}/register")
        cancelled_again = client.delete(f"/events/{event_id}/register")

        # Assert
        assert signed_up.json() == {
            "event_id": event_id,
            "registered": True,
            "registration_count": 1,
        }
        assert again.status_code == 400
        assert fetched["event"]["registration_count"] == 1
        assert cancelled.json()["registered"] is False
        assert cancelled.json()["registration_count"] == 0
        assert cancelled_again.status_code == 400

    def test_full_event(self, client):
        event = create_event(client, max_attendees=1)
        for username in ("olga", "omar"):
            register(client, username)

        login(client, "olga@example.org", MEMBER_PASSWORD)
        first = client.post(f"/events/{event['event_id']}/register")
        login(client, "omar@example.org", MEMBER_PASSWORD)
        second = client.post(f"/events/{event['event_id']}/register")

        assert first.status_code == 200
        assert second.status_code == 400

    def test_registration_requires_session(self, client):
        event = create_event(client)
        client.post("/auth/logout")

        response = client.post(f"/events/{event['event_id']}/register")

        assert response.status_code == 401
