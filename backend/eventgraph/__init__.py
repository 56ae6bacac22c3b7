"""Event / attendee / RSVP graph service."""
