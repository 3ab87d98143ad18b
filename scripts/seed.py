#!/usr/bin/env python3
"""
Seed reference and demo data for the volunteer matching platform.

Every step is an upsert, so the seed can be run any number of times.
"""

from datetime import date
from flask import current_app
from volunteer_match import db
from volunteer_match.models import UserCredentials, VolunteerProfile, EventDetails, ReferenceState

US_STATES = [
    ('AL', 'Alabama'), ('AK', 'Alaska'), ('AZ', 'Arizona'), ('AR', 'Arkansas'),
    ('CA', 'California'), ('CO', 'Colorado'), ('CT', 'Connecticut'), ('DE', 'Delaware'),
    ('FL', 'Florida'), ('GA', 'Georgia'), ('HI', 'Hawaii'), ('ID', 'Idaho'),
    ('IL', 'Illinois'), ('IN', 'Indiana'), ('IA', 'Iowa'), ('KS', 'Kansas'),
    ('KY', 'Kentucky'), ('LA', 'Louisiana'), ('ME', 'Maine'), ('MD', 'Maryland'),
    ('MA', 'Massachusetts'), ('MI', 'Michigan'), ('MN', 'Minnesota'), ('MS', 'Mississippi'),
    ('MO', 'Missouri'), ('MT', 'Montana'), ('NE', 'Nebraska'), ('NV', 'Nevada'),
    ('NH', 'New Hampshire'), ('NJ', 'New Jersey'), ('NM', 'New Mexico'), ('NY', 'New York'),
    ('NC', 'North Carolina'), ('ND', 'North Dakota'), ('OH', 'Ohio'), ('OK', 'Oklahoma'),
    ('OR', 'Oregon'), ('PA', 'Pennsylvania'), ('RI', 'Rhode Island'), ('SC', 'South Carolina'),
    ('SD', 'South Dakota'), ('TN', 'Tennessee'), ('TX', 'Texas'), ('UT', 'Utah'),
    ('VT', 'Vermont'), ('VA', 'Virginia'), ('WA', 'Washington'), ('WV', 'West Virginia'),
    ('WI', 'Wisconsin'), ('WY', 'Wyoming'),
]

DEMO_VOLUNTEERS = [
    {'id': 'vol-alice', 'name': 'Alice Cooper', 'location': 'Houston',
     'skills': ['First Aid', 'Teamwork', 'Customer Service']},
    {'id': 'vol-bob', 'name': 'Bob Miller', 'location': 'Austin',
     'skills': ['Lifting', 'Logistics']},
    {'id': 'vol-carol', 'name': 'Carol Garcia', 'location': 'Dallas',
     'skills': ['Organization', 'Event Coordination', 'Teamwork']},
    {'id': 'vol-daniel', 'name': 'Daniel Martinez', 'location': 'Houston',
     'skills': ['Logistics', 'Lifting', 'Teamwork']},
    {'id': 'vol-emma', 'name': 'Emma Anderson', 'location': 'San Antonio',
     'skills': ['Customer Service', 'Organization']},
]

DEMO_EVENTS = [
    {'id': 'evt-food-drive', 'name': 'Community Food Drive', 'location': 'Houston',
     'requiredSkills': ['Lifting', 'Logistics', 'Teamwork'], 'urgency': 'High',
     'date': '2025-11-08'},
    {'id': 'evt-health-fair', 'name': 'Neighborhood Health Fair', 'location': 'Austin',
     'requiredSkills': ['First Aid', 'Customer Service'], 'urgency': 'Medium',
     'date': '2025-11-15'},
    {'id': 'evt-charity-run', 'name': 'Charity 5K Run', 'location': 'Dallas',
     'requiredSkills': ['Event Coordination', 'Organization', 'First Aid'], 'urgency': 'Low',
     'date': '2025-12-06'},
    {'id': 'evt-flood-relief', 'name': 'Flood Relief Supply Sorting', 'location': 'San Antonio',
     'requiredSkills': ['Lifting', 'Organization'], 'urgency': 'Critical',
     'date': '2025-10-30'},
]


def seed_all():
    """Seed reference states, then demo volunteers and events."""
    seed_states()
    seed_demo()


def seed_states(states=None):
    """Insert missing reference states; existing rows are left unchanged."""
    current_app.logger.info('Seeding states...')

    for code, name in (US_STATES if states is None else states):
        if not db.session.get(ReferenceState, code):
            db.session.add(ReferenceState(state_code=code, state_name=name))

    db.session.commit()
    current_app.logger.info('States seeded successfully!')


def seed_demo(volunteers=None, events=None):
    """Upsert demo volunteers (one transaction each) and demo events."""
    current_app.logger.info('Seeding demo volunteers and events...')

    for volunteer in (DEMO_VOLUNTEERS if volunteers is None else volunteers):
        try:
            upsert_volunteer(volunteer)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    for event in (DEMO_EVENTS if events is None else events):
        upsert_event(event)
    db.session.commit()

    current_app.logger.info('Demo volunteers and events seeded.')


def upsert_volunteer(volunteer):
    """Write credentials, then the profile, for one demo volunteer.

    Credentials are never changed on reseed; the profile is refreshed.
    """
    credentials = db.session.get(UserCredentials, volunteer['id'])
    if not credentials:
        credentials = UserCredentials(user_id=volunteer['id'])
        credentials.set_password(current_app.config['DEMO_PASSWORD'])
        db.session.add(credentials)
        db.session.flush()

    fields = {
        'full_name': volunteer['name'],
        'address1': volunteer['location'],
        'city': volunteer['location'],
        'state': 'TX',
        'zip_code': '00000',
        'skills': list(volunteer['skills']),
        'preferences': None,
        'availability': [],
    }

    profile = VolunteerProfile.get_by_user_id(volunteer['id'])
    if profile:
        for column, value in fields.items():
            setattr(profile, column, value)
    else:
        profile = VolunteerProfile(user_id=volunteer['id'], **fields)
        db.session.add(profile)

    return profile


def upsert_event(event):
    """Create or refresh one demo event by id."""
    fields = {
        'event_name': event['name'],
        'description': event['name'],
        'location': event['location'],
        'required_skills': list(event['requiredSkills']),
        'urgency': event['urgency'],
        'event_date': date.fromisoformat(event['date']),
    }

    record = db.session.get(EventDetails, event['id'])
    if record:
        for column, value in fields.items():
            setattr(record, column, value)
    else:
        record = EventDetails(id=event['id'], **fields)
        db.session.add(record)

    return record
