"""
Pytest configuration and fixtures.

Each test gets a fresh application bound to an in-memory SQLite database and
a recording notification bus.
"""

from datetime import date, datetime, timezone

import pytest

from volunteer_match import create_app, db
from volunteer_match.models import UserCredentials, VolunteerProfile, EventDetails
from volunteer_match.services.notification_service import NotificationBus


class RecordingBus(NotificationBus):
    """Notification bus that remembers every publication."""

    def __init__(self):
        super().__init__()
        self.published = []

    def publish(self, channel, payload):
        self.published.append((channel, payload))
        return super().publish(channel, payload)


@pytest.fixture
def bus():
    return RecordingBus()


@pytest.fixture
def app(bus):
    app = create_app('testing', bus=bus)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_volunteer(app):
    def _make(user_id, name='Test Volunteer', location='Houston', skills=None, created_at=None):
        credentials = UserCredentials(user_id=user_id, password_hash='not-a-real-hash')
        profile = VolunteerProfile(
            user_id=user_id,
            full_name=name,
            address1=location,
            city=location,
            zip_code='00000',
            skills=list(skills or []),
            availability=[]
        )
        if created_at is not None:
            profile.created_at = created_at
        db.session.add_all([credentials, profile])
        db.session.commit()
        return profile
    return _make


@pytest.fixture
def make_event(app):
    def _make(event_id, name='Test Event', location='Houston', required_skills=None,
              urgency='Medium', event_date=date(2025, 11, 8)):
        event = EventDetails(
            id=event_id,
            event_name=name,
            description=name,
            location=location,
            required_skills=list(required_skills or []),
            urgency=urgency,
            event_date=event_date
        )
        db.session.add(event)
        db.session.commit()
        return event
    return _make


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)
