"""Pydantic schemas for attendee / RSVP requests."""
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel


class AttendeeAdd(BaseModel):
    event_id: str
    name: str
    email: Optional[str] = None


class RSVPPayload(BaseModel):
    event_id: str
    attendee_id: str
    rsvp_status: str  # yes, no, maybe; validated by the service


class RemoveResult(BaseModel):
    success: bool
