"""Event record.

Only normalized fields are stored here: the creator and tags are kept as
ids and expanded by the resolver on read. The attendee count is never
stored, it is derived from the link collection.
"""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Event:
    id: str
    title: str
    date: str  # ISO-8601 timestamp, kept as given
    created_by: str
    tag_ids: tuple[str, ...] = field(default_factory=tuple)
