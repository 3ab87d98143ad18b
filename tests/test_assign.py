"""
Tests for assigning volunteers to events.
"""

from datetime import date

import pytest

from volunteer_match import db
from volunteer_match.models import Assignment, Notice
from volunteer_match.services.notification_service import NotificationService


@pytest.fixture
def volunteer_and_event(make_volunteer, make_event):
    make_volunteer('vol-1', name='Alice', skills=['Lifting'])
    make_event('evt-1', name='Food Drive', location='Houston', required_skills=['Lifting'],
               event_date=date(2025, 11, 8))


def post_assign(client, body):
    return client.post('/api/match/assign', json=body)


class TestAssignValidation:

    def test_missing_event_id_is_400_even_for_valid_volunteer(self, client, volunteer_and_event):
        response = post_assign(client, {'volunteerId': 'vol-1'})

        assert response.status_code == 400
        body = response.get_json()
        assert body['error'] == 'volunteerId and eventId required'
        assert list(body['details']) == ['eventId']

    def test_missing_event_id_is_400_for_unknown_volunteer(self, client):
        response = post_assign(client, {'volunteerId': 'nobody'})
        assert response.status_code == 400

    def test_blank_fields_are_missing(self, client):
        response = post_assign(client, {'volunteerId': '   ', 'eventId': ''})

        assert response.status_code == 400
        assert set(response.get_json()['details']) == {'volunteerId', 'eventId'}

    def test_empty_or_non_object_body_is_400(self, client):
        assert client.post('/api/match/assign').status_code == 400
        assert post_assign(client, ['vol-1', 'evt-1']).status_code == 400

    def test_nothing_written_on_validation_failure(self, client, bus, volunteer_and_event):
        post_assign(client, {'eventId': 'evt-1'})

        assert Assignment.query.count() == 0
        assert Notice.query.count() == 0
        assert bus.published == []


class TestAssignLookup:

    def test_unknown_event_is_404(self, client, volunteer_and_event):
        response = post_assign(client, {'volunteerId': 'vol-1', 'eventId': 'evt-missing'})

        assert response.status_code == 404
        assert response.get_json() == {'error': 'not found'}

    def test_unknown_volunteer_is_404(self, client, volunteer_and_event):
        response = post_assign(client, {'volunteerId': 'nobody', 'eventId': 'evt-1'})

        assert response.status_code == 404
        assert Assignment.query.count() == 0


class TestAssignSuccess:

    def test_creates_assignment_notice_and_one_publish(self, client, bus, volunteer_and_event):
        response = post_assign(client, {'volunteerId': 'vol-1', 'eventId': 'evt-1'})

        assert response.status_code == 200
        body = response.get_json()
        assert body['ok'] is True
        assignment = body['assignment']
        assert assignment['volunteerId'] == 'vol-1'
        assert assignment['eventId'] == 'evt-1'
        assert isinstance(assignment['createdAtMs'], int) and assignment['createdAtMs'] > 0
        assert assignment['id']

        assert Assignment.query.count() == 1
        assert Notice.query.count() == 1

        assert len(bus.published) == 1
        channel, payload = bus.published[0]
        assert channel == 'notice:vol-1'
        notice = Notice.query.one()
        assert payload == {
            'id': notice.id,
            'volunteerId': 'vol-1',
            'title': 'Assigned: Food Drive',
            'body': 'Houston • 2025-11-08T00:00:00.000Z',
            'type': 'success',
            'createdAtMs': notice.created_at_ms,
        }

    def test_live_subscriber_receives_notice(self, client, bus, volunteer_and_event):
        subscriber = bus.subscribe('notice:vol-1')

        post_assign(client, {'volunteerId': 'vol-1', 'eventId': 'evt-1'})

        payload = subscriber.get_nowait()
        assert payload['title'] == 'Assigned: Food Drive'
        assert subscriber.empty()

    def test_repeated_assignment_is_allowed(self, client, volunteer_and_event):
        post_assign(client, {'volunteerId': 'vol-1', 'eventId': 'evt-1'})
        response = post_assign(client, {'volunteerId': 'vol-1', 'eventId': 'evt-1'})

        assert response.status_code == 200
        assert Assignment.query.count() == 2
        assert Notice.query.count() == 2


class TestAssignFailure:

    def test_notice_failure_is_opaque_500_and_keeps_assignment(self, client, bus, monkeypatch,
                                                                volunteer_and_event):
        def boom(volunteer, event):
            raise RuntimeError('notice table locked')
        monkeypatch.setattr(NotificationService, 'notify_volunteer_assignment', staticmethod(boom))

        response = post_assign(client, {'volunteerId': 'vol-1', 'eventId': 'evt-1'})

        assert response.status_code == 500
        assert response.get_json() == {'error': 'assign_failed'}
        # The two writes are committed separately
        db.session.expire_all()
        assert Assignment.query.count() == 1
        assert Notice.query.count() == 0
        assert bus.published == []
