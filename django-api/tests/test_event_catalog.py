"""Integration tests for the events API.

Run with: pytest tests/test_event_catalog.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from events import models

EVENT_PAYLOAD = {
    "title": "Summer Camp",
    "event_type": "camp",
    "age_group": "cubs",
    "starts_at": "2025-07-18T16:00:00Z",
    "ends_at": "2025-07-20T12:00:00Z",
    "location": "Gilwell Park",
    "description": "Weekend under canvas",
    "cost": "45.00",
}


@pytest.mark.django_db
class TestEventList:
    """Tests for GET /api/events"""

    def test_list_events_empty_catalog(self, api_client: APIClient):
        """Given no events, returns empty list."""
        response = api_client.get("/api/events")

        assert response.status_code == 200
        assert response.json() == {"events": []}

    def test_list_events_public_only(self, api_client: APIClient, create_event):
        published = create_event(title="Pack night")
        cancelled = create_event(title="Hike", status="cancelled")
        create_event(title="Planning", status="draft")

        response = api_client.get("/api/events")

        ids = [event["id"] for event in response.json()["events"]]
        assert sorted(ids) == sorted([str(published.id), str(cancelled.id)])

    def test_list_events_expands_recurring(self, api_client: APIClient, create_event):
        start = datetime(2030, 1, 7, 18, 30, tzinfo=timezone.utc)
        row = create_event(
            starts_at=start,
            ends_at=start + timedelta(hours=1, minutes=30),
            is_recurring=True,
            recurrence_rule="FREQ=WEEKLY;UNTIL=20300121",
        )

        events = api_client.get("/api/events").json()["events"]

        assert [event["id"] for event in events] == [
            f"{row.id}_2030-01-07",
            f"{row.id}_2030-01-14",
            f"{row.id}_2030-01-21",
        ]
        assert all(event["series_id"] == str(row.id) for event in events)

    def test_list_events_without_expansion(self, api_client: APIClient, create_event):
        row = create_event(is_recurring=True, recurrence_rule="FREQ=DAILY;UNTIL=20991231")

        events = api_client.get("/api/events?expand=false").json()["events"]

        assert [event["id"] for event in events] == [str(row.id)]
        assert events[0]["recurrence_rule"] == "FREQ=DAILY;UNTIL=20991231"

    def test_list_events_cached_response(self, api_client: APIClient, create_event):
        """Given cached data, returns from cache."""
        create_event()
        first = api_client.get("/api/events").json()

        models.Event.objects.all().update(title="Changed behind the cache")
        second = api_client.get("/api/events").json()

        assert first == second


@pytest.mark.django_db
class TestEventDetail:
    """Tests for GET /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient, create_event):
        """Given event exists, returns event details."""
        row = create_event(cost="2.50", organizer_name="Akela")

        response = api_client.get(f"/api/events/{row.id}")

        assert response.status_code == 200
        event = response.json()["event"]
        assert event["id"] == str(row.id)
        assert event["title"] == "Pack Meeting"
        assert event["cost"] == "2.50"
        assert event["organizer_name"] == "Akela"
        assert event["series_id"] is None

    def test_get_event_not_found(self, api_client: APIClient):
        """Given event does not exist, returns 404."""
        response = api_client.get("/api/events/00000000-0000-4000-8000-000000000000")

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "EVENT_NOT_FOUND"

    def test_get_event_invalid_id_format(self, api_client: APIClient):
        """Given invalid UUID, returns 400."""
        response = api_client.get("/api/events/not-a-uuid")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_EVENT_ID"

    def test_draft_hidden_from_anonymous(self, api_client: APIClient, create_event):
        row = create_event(status="draft")
        assert api_client.get(f"/api/events/{row.id}").status_code == 404

    def test_draft_visible_to_leaders(self, leader_client: APIClient, create_event):
        row = create_event(status="draft")
        assert leader_client.get(f"/api/events/{row.id}").status_code == 200


@pytest.mark.django_db
class TestEventWrites:
    def test_create_requires_authentication(self, api_client: APIClient):
        response = api_client.post("/api/events", EVENT_PAYLOAD, format="json")
        assert response.status_code == 403

    def test_create_event(self, leader_client: APIClient, leader):
        response = leader_client.post("/api/events", EVENT_PAYLOAD, format="json")

        assert response.status_code == 201
        event = response.json()["event"]
        assert event["status"] == "draft"
        assert event["created_by"] == str(leader.pk)
        assert models.Event.objects.filter(pk=event["id"]).exists()

    def test_create_rejects_end_before_start(self, leader_client: APIClient):
        payload = {**EVENT_PAYLOAD, "ends_at": "2025-07-18T15:00:00Z"}

        response = leader_client.post("/api/events", payload, format="json")

        assert response.status_code == 400
        assert "ends_at" in response.json()

    def test_create_rejects_unknown_event_type(self, leader_client: APIClient):
        payload = {**EVENT_PAYLOAD, "event_type": "party"}
        response = leader_client.post("/api/events", payload, format="json")
        assert response.status_code == 400

    def test_partial_update(self, leader_client: APIClient, create_event):
        row = create_event()

        response = leader_client.patch(
            f"/api/events/{row.id}", {"status": "cancelled"}, format="json"
        )

        assert response.status_code == 200
        assert response.json()["event"]["status"] == "cancelled"
        row.refresh_from_db()
        assert row.status == "cancelled"

    def test_update_rejects_inverted_time_range(self, leader_client: APIClient, create_event):
        row = create_event()
        ends_at = (row.starts_at - timedelta(hours=1)).isoformat()

        response = leader_client.put(f"/api/events/{row.id}", {"ends_at": ends_at}, format="json")

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_TIME_RANGE"

    def test_update_missing_event(self, leader_client: APIClient):
        response = leader_client.patch(
            "/api/events/00000000-0000-4000-8000-000000000000", {"title": "x"}, format="json"
        )
        assert response.status_code == 404

    def test_delete_event(self, leader_client: APIClient, create_event):
        row = create_event()

        response = leader_client.delete(f"/api/events/{row.id}")

        assert response.status_code == 200
        assert not models.Event.objects.filter(pk=row.id).exists()

    def test_duplicate_event(self, leader_client: APIClient, create_event):
        row = create_event(title="Cycling badge")

        response = leader_client.post(f"/api/events/{row.id}/duplicate")

        assert response.status_code == 201
        event = response.json()["event"]
        assert event["title"] == "Copy of Cycling badge"
        assert event["status"] == "draft"
        assert event["id"] != str(row.id)


@pytest.mark.django_db
class TestAdminList:
    def test_requires_authentication(self, api_client: APIClient):
        assert api_client.get("/api/events/admin/all").status_code == 403

    def test_lists_every_status(self, leader_client: APIClient, create_event):
        for status in ("draft", "published", "cancelled", "archived"):
            create_event(status=status)

        events = leader_client.get("/api/events/admin/all").json()["events"]

        assert sorted(event["status"] for event in events) == [
            "archived",
            "cancelled",
            "draft",
            "published",
        ]

    def test_filters_by_status(self, leader_client: APIClient, create_event):
        draft = create_event(status="draft")
        create_event(status="published")

        events = leader_client.get("/api/events/admin/all?status=draft").json()["events"]

        assert [event["id"] for event in events] == [str(draft.id)]

    def test_unknown_status_is_rejected(self, leader_client: APIClient):
        response = leader_client.get("/api/events/admin/all?status=deleted")
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_STATUS"


@pytest.mark.django_db
class TestCalendarExport:
    def test_single_event_export(self, api_client: APIClient, create_event):
        row = create_event(
            title="Pack Meeting: Knots & Lashings",
            is_recurring=True,
            recurrence_rule="FREQ=WEEKLY;UNTIL=20991231",
            cost="3.00",
        )

        response = api_client.get(f"/api/events/{row.id}/calendar.ics")

        assert response.status_code == 200
        assert response["Content-Type"] == "text/calendar; charset=utf-8"
        assert (
            response["Content-Disposition"]
            == 'attachment; filename="pack-meeting-knots-lashings.ics"'
        )
        body = response.content.decode("utf-8")
        assert body.startswith("BEGIN:VCALENDAR\r\n")
        assert f"UID:{row.id}@cubs-site" in body
        assert "RRULE:FREQ=WEEKLY;UNTIL=20991231" in body
        assert "Cost: £3.00" in body

    def test_single_export_of_missing_event(self, api_client: APIClient):
        response = api_client.get("/api/events/00000000-0000-4000-8000-000000000000/calendar.ics")
        assert response.status_code == 404

    def test_single_export_hides_drafts(self, api_client: APIClient, create_event):
        row = create_event(status="draft")
        assert api_client.get(f"/api/events/{row.id}/calendar.ics").status_code == 404

    def test_feed_export(self, api_client: APIClient, create_event):
        upcoming = create_event(title="Pack night", cost="2.00")
        create_event(title="Secret planning", status="draft")
        create_event(title="Long ago", starts_at=datetime.now(timezone.utc) - timedelta(days=400))

        response = api_client.get("/api/events/calendar.ics")

        assert response.status_code == 200
        assert response["Content-Type"] == "text/calendar; charset=utf-8"
        assert response["Content-Disposition"] == 'attachment; filename="events.ics"'
        body = response.content.decode("utf-8")
        assert body.count("BEGIN:VEVENT") == 1
        assert f"UID:{upcoming.id}@cubs-site" in body
        assert "Cost:" not in body

    def test_empty_feed(self, api_client: APIClient):
        body = api_client.get("/api/events/calendar.ics").content.decode("utf-8")

        assert body.startswith("BEGIN:VCALENDAR")
        assert body.endswith("END:VCALENDAR")
        assert "BEGIN:VEVENT" not in body
