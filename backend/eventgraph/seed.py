"""Initial data set loaded into a fresh store at startup.

Ids here are short numeric strings; everything created at runtime gets a
uuid4 id from the store instead.
"""
import logging

from eventgraph.models.attendee import RSVPStatus
from eventgraph.store import EntityStore

logger = logging.getLogger(__name__)

# (id, name, email)
USERS = [
    ("1", "John Doe", "john@example.com"),
    ("2", "Jane Smith", "jane@example.com"),
    ("3", "Alice Johnson", "alice.johnson@example.com"),
    ("4", "Bob Williams", "bob.williams@example.com"),
    ("5", "Carol Brown", "carol.brown@example.com"),
    ("6", "David Miller", "david.miller@example.com"),
    ("7", "Eve Davis", "eve.davis@example.com"),
    ("8", "Frank Wilson", "frank.wilson@example.com"),
    ("9", "Grace Lee", "grace.lee@example.com"),
    ("10", "Henry Clark", "henry.clark@example.com"),
    ("11", "Ivy Lewis", "ivy.lewis@example.com"),
    ("12", "Jack Walker", "jack.walker@example.com"),
    ("13", "Kathy Hall", "kathy.hall@example.com"),
    ("14", "Leo Allen", "leo.allen@example.com"),
    ("15", "Mona Young", "mona.young@example.com"),
    ("16", "Nina King", "nina.king@example.com"),
    ("17", "Oscar Wright", "oscar.wright@example.com"),
    ("18", "Paul Scott", "paul.scott@example.com"),
    ("19", "Quinn Green", "quinn.green@example.com"),
    ("20", "Rita Adams", "rita.adams@example.com"),
    ("21", "Sam Baker", "sam.baker@example.com"),
    ("22", "Tina Nelson", "tina.nelson@example.com"),
    ("23", "Uma Carter", "uma.carter@example.com"),
    ("24", "Vince Perez", "vince.perez@example.com"),
    ("25", "Wendy Roberts", "wendy.roberts@example.com"),
    ("26", "Xander Evans", "xander.evans@example.com"),
    ("27", "Yara Turner", "yara.turner@example.com"),
    ("28", "Zane Parker", "zane.parker@example.com"),
    ("29", "Amy Foster", "amy.foster@example.com"),
    ("30", "Ben Morgan", "ben.morgan@example.com"),
    ("31", "Cathy Reed", "cathy.reed@example.com"),
    ("32", "Derek Cox", "derek.cox@example.com"),
]

# (id, name)
TAGS = [
    ("1", "Internal"),
    ("2", "Public"),
    ("3", "Team Offsite"),
    ("4", "Conference"),
]

# (id, name, email)
ATTENDEES = [
    ("1", "Olivia Stone", "olivia.stone@example.com"),
    ("2", "Liam Brooks", "liam.brooks@example.com"),
    ("3", "Sophia Reed", "sophia.reed@example.com"),
    ("4", "Mason Price", "mason.price@example.com"),
    ("5", "Isabella Bell", "isabella.bell@example.com"),
    ("6", "Logan Ward", "logan.ward@example.com"),
    ("7", "Mia Cox", "mia.cox@example.com"),
    ("8", "Lucas Gray", "lucas.gray@example.com"),
    ("9", "Charlotte Diaz", "charlotte.diaz@example.com"),
    ("10", "Elijah Ross", "elijah.ross@example.com"),
    ("11", "Ava Rivera", "ava.rivera@example.com"),
    ("12", "James Cooper", "james.cooper@example.com"),
    ("13", "Emily Bailey", "emily.bailey@example.com"),
    ("14", "Benjamin Murphy", "benjamin.murphy@example.com"),
    ("15", "Harper Kelly", "harper.kelly@example.com"),
    ("16", "Ethan Howard", "ethan.howard@example.com"),
    ("17", "Abigail Ward", "abigail.ward@example.com"),
    ("18", "Alexander Cox", "alexander.cox@example.com"),
    ("19", "Ella Foster", "ella.foster@example.com"),
    ("20", "Daniel Morgan", "daniel.morgan@example.com"),
    ("21", "Scarlett Reed", "scarlett.reed@example.com"),
    ("22", "Matthew Evans", "matthew.evans@example.com"),
    ("23", "Victoria Turner", "victoria.turner@example.com"),
    ("24", "Jackson Parker", "jackson.parker@example.com"),
    ("25", "Grace Adams", "grace.adams@example.com"),
    ("26", "Sebastian Nelson", "sebastian.nelson@example.com"),
    ("27", "Chloe Carter", "chloe.carter@example.com"),
    ("28", "Aiden Perez", "aiden.perez@example.com"),
    ("29", "Penelope Baker", "penelope.baker@example.com"),
    ("30", "Jackie Lee", "jackie.lee@example.com"),
    ("31", "Noah Brooks", "noah.brooks@example.com"),
    ("32", "Zoe Hall", "zoe.hall@example.com"),
]

# (id, title, date, created_by, tag_ids)
EVENTS = [
    ("1", "Team Meeting", "2024-08-01T10:00:00Z", "3", ("1",)),
    ("2", "Product Launch", "2024-08-05T14:00:00Z", "4", ("2", "4")),
    ("3", "Annual Conference", "2024-09-10T09:00:00Z", "5", ("4",)),
    ("4", "Offsite Retreat", "2024-09-20T12:00:00Z", "6", ("3",)),
    ("5", "Hackathon", "2024-10-15T08:00:00Z", "7", ("2",)),
    ("6", "Quarterly Review", "2024-10-25T15:00:00Z", "8", ("1", "2")),
    ("7", "Board Meeting", "2024-11-01T11:00:00Z", "9", ("1",)),
    ("8", "Team Offsite", "2024-11-10T13:00:00Z", "10", ("3",)),
    ("9", "Public Webinar", "2024-11-20T17:00:00Z", "11", ("2",)),
    ("10", "Internal Training", "2024-12-01T09:30:00Z", "12", ("1",)),
]

# (id, event_id, attendee_id, rsvp_status)
LINKS = [
    ("1", "1", "1", RSVPStatus.yes),
    ("2", "1", "2", RSVPStatus.maybe),
    ("3", "1", "3", RSVPStatus.no),
    ("4", "2", "4", RSVPStatus.yes),
    ("5", "2", "5", RSVPStatus.yes),
    ("6", "2", "6", RSVPStatus.maybe),
    ("7", "3", "7", RSVPStatus.yes),
    ("8", "3", "8", RSVPStatus.no),
    ("9", "3", "9", RSVPStatus.maybe),
    ("10", "4", "10", RSVPStatus.yes),
    ("11", "4", "11", RSVPStatus.yes),
    ("12", "4", "12", RSVPStatus.no),
    ("13", "5", "13", RSVPStatus.maybe),
    ("14", "5", "14", RSVPStatus.yes),
    ("15", "5", "15", RSVPStatus.no),
    ("16", "6", "16", RSVPStatus.yes),
    ("17", "6", "17", RSVPStatus.maybe),
    ("18", "6", "18", RSVPStatus.no),
    ("19", "7", "19", RSVPStatus.yes),
    ("20", "7", "20", RSVPStatus.maybe),
    ("21", "7", "21", RSVPStatus.no),
    ("22", "8", "22", RSVPStatus.yes),
    ("23", "8", "23", RSVPStatus.maybe),
    ("24", "8", "24", RSVPStatus.no),
    ("25", "9", "25", RSVPStatus.yes),
    ("26", "9", "26", RSVPStatus.maybe),
    ("27", "9", "27", RSVPStatus.no),
    ("28", "10", "28", RSVPStatus.yes),
    ("29", "10", "29", RSVPStatus.maybe),
    ("30", "10", "30", RSVPStatus.no),
    ("31", "10", "31", RSVPStatus.yes),
    ("32", "10", "32", RSVPStatus.maybe),
]


def seed_store(store: EntityStore) -> EntityStore:
    """Load the initial data set into ``store`` and return it."""
    with store.lock:
        for user_id, name, email in USERS:
            store.add_user(name=name, email=email, record_id=user_id)
        for tag_id, name in TAGS:
            store.add_tag(name=name, record_id=tag_id)
        for attendee_id, name, email in ATTENDEES:
            store.add_attendee(name=name, email=email, record_id=attendee_id)
        for event_id, title, date, created_by, tag_ids in EVENTS:
            store.add_event(title=title, date=date, created_by=created_by, tag_ids=tag_ids, record_id=event_id)
        for link_id, event_id, attendee_id, rsvp_status in LINKS:
            store.add_link(event_id=event_id, attendee_id=attendee_id, rsvp_status=rsvp_status, record_id=link_id)
    logger.info("Seeded store: %s", store.counts())
    return store
