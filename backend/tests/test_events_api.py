"""Tests for the REST routes and their error mapping."""


def _make_event(client, title: str = "Sync", created_by: str = "1", tag_ids: list = None):
    """Helper — create an event via the API."""
    return client.post("/api/events/", json={
        "title": title,
        "date": "2030-01-01T00:00:00Z",
        "created_by": created_by,
        "tag_ids": tag_ids if tag_ids is not None else ["1"],
    })


class TestReads:
    def test_health(self, client):
        assert client.get("/api/health").json() == {"status": "ok"}

    def test_list_users_and_tags(self, client):
        assert len(client.get("/api/users/").json()) == 32
        tags = client.get("/api/tags/").json()
        assert tags[0] == {"id": "1", "name": "Internal"}

    def test_list_events(self, client):
        events = client.get("/api/events/").json()
        assert len(events) == 10
        assert events[0]["title"] == "Team Meeting"
        assert events[0]["attendee_count"] == 3

    def test_get_event(self, client):
        resp = client.get("/api/events/2")
        assert resp.status_code == 200
        data = resp.json()
        assert data["created_by"]["id"] == "4"
        assert [a["rsvp_status"] for a in data["attendees"]] == ["yes", "yes", "maybe"]

    def test_get_event_not_found(self, client):
        resp = client.get("/api/events/missing")
        assert resp.status_code == 404
        assert resp.json() == {"detail": "Event not found", "code": "EVENT_NOT_FOUND"}

    def test_rsvp_display_pending(self, client):
        resp = client.get("/api/events/1/attendees/20/rsvp")
        assert resp.json() == {"rsvp_status": "pending"}

    def test_rsvp_display_unknown_event_404(self, client):
        resp = client.get("/api/events/missing/attendees/20/rsvp")
        assert resp.status_code == 404
        assert resp.json()["code"] == "EVENT_NOT_FOUND"

    def test_rsvp_display_unknown_attendee_404(self, client):
        resp = client.get("/api/events/1/attendees/missing/rsvp")
        assert resp.status_code == 404
        assert resp.json()["code"] == "ATTENDEE_NOT_FOUND"


class TestCreateEvent:
    def test_create_event(self, client):
        resp = _make_event(client)
        assert resp.status_code == 201
        data = resp.json()
        assert data["attendee_count"] == 0
        assert data["tags"] == [{"id": "1", "name": "Internal"}]
        assert client.get(f"/api/events/{data['id']}").status_code == 200

    def test_unknown_user_404(self, client):
        resp = _make_event(client, created_by="999")
        assert resp.status_code == 404
        assert resp.json()["code"] == "USER_NOT_FOUND"
        assert len(client.get("/api/events/").json()) == 10

    def test_unknown_tag_404(self, client):
        resp = _make_event(client, tag_ids=["1", "42"])
        assert resp.status_code == 404
        assert resp.json() == {"detail": "Tag with id 42 not found", "code": "TAG_NOT_FOUND"}


class TestAttendees:
    def test_add_and_duplicate(self, client):
        payload = {"event_id": "1", "name": "X", "email": "x@e.com"}
        first = client.post("/api/attendees/", json=payload)
        assert first.status_code == 201
        assert first.json()["rsvp_status"] == "yes"

        second = client.post("/api/attendees/", json=payload)
        assert second.status_code == 409
        assert second.json()["code"] == "DUPLICATE_ATTENDEE"
        assert client.get("/api/events/1").json()["attendee_count"] == 4

    def test_remove(self, client):
        resp = client.delete("/api/attendees/1/2")
        assert resp.status_code == 200
        assert resp.json() == {"success": True}
        assert client.delete("/api/attendees/1/2").status_code == 404

    def test_set_rsvp(self, client):
        resp = client.post("/api/attendees/rsvp", json={
            "event_id": "1", "attendee_id": "3", "rsvp_status": "maybe",
        })
        assert resp.status_code == 200
        assert resp.json()["id"] == "3"
        assert resp.json()["rsvp_status"] == "maybe"

    def test_set_rsvp_invalid_400(self, client):
        resp = client.post("/api/attendees/rsvp", json={
            "event_id": "1", "attendee_id": "3", "rsvp_status": "pending",
        })
        assert resp.status_code == 400
        assert resp.json()["code"] == "INVALID_RSVP_STATUS"
