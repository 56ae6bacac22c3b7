"""Pydantic schemas for Events and their nested graph."""
from __future__ import annotations
from typing import Optional
from pydantic import BaseModel


class EventCreate(BaseModel):
    title: str
    date: str  # ISO-8601 timestamp
    created_by: str
    tag_ids: list[str] = []


class UserOut(BaseModel):
    id: str
    name: str
    email: str

    model_config = {"from_attributes": True}


class TagOut(BaseModel):
    id: str
    name: str

    model_config = {"from_attributes": True}


class AttendeeOut(BaseModel):
    id: str
    name: str
    email: Optional[str] = None

    model_config = {"from_attributes": True}


class EventAttendeeOut(BaseModel):
    id: str  # link id
    attendee: AttendeeOut
    rsvp_status: str


class EventOut(BaseModel):
    id: str
    title: str
    date: str
    created_by: Optional[UserOut] = None
    tags: list[TagOut] = []
    attendees: list[EventAttendeeOut] = []
    attendee_count: int = 0
