"""Tests for nested event resolution, including dangling references."""
import threading

import pytest

from eventgraph.errors import AttendeeNotFound, EventNotFound
from eventgraph.models.attendee import RSVPStatus
from eventgraph.services import event_service, resolver


class TestResolveEvent:
    def test_seeded_event_shape(self, store):
        out = resolver.resolve_event(store, store.events["2"])
        assert out.title == "Product Launch"
        assert out.created_by.name == "Bob Williams"
        assert [t.name for t in out.tags] == ["Public", "Conference"]
        assert [(a.id, a.attendee.id, a.rsvp_status) for a in out.attendees] == [
            ("4", "4", "yes"),
            ("5", "5", "yes"),
            ("6", "6", "maybe"),
        ]
        assert out.attendee_count == 3

    def test_resolve_events_keeps_order(self, store):
        outs = resolver.resolve_events(store, store.events.values())
        assert [o.id for o in outs] == [str(i) for i in range(1, 11)]

    def test_reflects_latest_mutation(self, store):
        event = store.events["1"]
        store.update_link_status("1", RSVPStatus.no)
        out = resolver.resolve_event(store, event)
        assert out.attendees[0].rsvp_status == "no"


class TestDanglingReferences:
    """Unresolved ids on the read path are dropped, never raised."""

    def test_missing_creator_resolves_to_none(self, store):
        event = store.add_event("Orphan", "2030-01-01T00:00:00Z", "ghost")
        assert resolver.resolve_created_by(store, event) is None
        assert resolver.resolve_event(store, event).created_by is None

    def test_missing_tag_dropped(self, store):
        event = store.add_event("Tagged", "2030-01-01T00:00:00Z", "1", tag_ids=["1", "ghost", "2"])
        assert [t.id for t in resolver.resolve_tags(store, event)] == ["1", "2"]

    def test_duplicate_tag_ids_resolved_each_time(self, store):
        event = store.add_event("Twice", "2030-01-01T00:00:00Z", "1", tag_ids=["1", "1"])
        assert [t.id for t in resolver.resolve_tags(store, event)] == ["1", "1"]

    def test_missing_attendee_dropped_but_counted(self, store):
        event = store.events["1"]
        store.add_link(event.id, "ghost")
        assert len(resolver.resolve_attendees(store, event)) == 3
        assert resolver.resolve_attendee_count(store, event) == 4


class TestRSVPDisplayStatus:
    def test_linked_attendee_shows_stored_status(self, store):
        assert resolver.rsvp_display_status(store, "1", "3") == "no"

    def test_unlinked_attendee_shows_pending(self, store):
        assert resolver.rsvp_display_status(store, "1", "30") == "pending"

    def test_unknown_event_raises(self, store):
        with pytest.raises(EventNotFound):
            resolver.rsvp_display_status(store, "missing", "1")

    def test_unknown_attendee_raises(self, store):
        with pytest.raises(AttendeeNotFound):
            resolver.rsvp_display_status(store, "1", "missing")


class TestConcurrentReads:
    """Field-level resolves stay consistent while another thread writes links."""

    def test_resolves_during_link_churn(self, store):
        stop = threading.Event()
        writer_errors = []

        def churn():
            i = 0
            try:
                while not stop.is_set():
                    entry = event_service.add_attendee_to_event(store, "2", name=f"P{i}", email=f"p{i}@e.com")
                    event_service.remove_attendee_from_event(store, "2", entry.attendee.id)
                    i += 1
            except Exception as exc:  # surfaced by the assertion below
                writer_errors.append(exc)

        writer = threading.Thread(target=churn)
        writer.start()
        reader_errors = []
        try:
            for _ in range(2000):
                try:
                    assert len(resolver.resolve_attendees(store, store.events["1"])) == 3
                    assert resolver.resolve_attendee_count(store, store.events["1"]) == 3
                    out = resolver.resolve_event(store, store.events["2"])
                    assert len(out.attendees) == out.attendee_count
                    resolver.rsvp_display_status(store, "2", "4")
                except RuntimeError as exc:
                    reader_errors.append(exc)
        finally:
            stop.set()
            writer.join(timeout=10)

        assert reader_errors == []
        assert writer_errors == []
        assert resolver.resolve_attendee_count(store, store.events["2"]) == 3
