"""
Tests for the matching API: listings, ranking and health.
"""

from datetime import date

import pytest
from sqlalchemy.exc import SQLAlchemyError

from volunteer_match.exceptions import NotFoundError
from volunteer_match.services.matching_service import MatchingService
from tests.conftest import utc


def test_health(client):
    response = client.get('/api/match/health')
    assert response.status_code == 200
    assert response.get_json() == {'ok': True}


class TestListVolunteers:

    def test_newest_first(self, client, make_volunteer):
        make_volunteer('vol-old', name='Old', created_at=utc(2024, 1, 1))
        make_volunteer('vol-new', name='New', skills=['Lifting'], created_at=utc(2025, 1, 1))

        response = client.get('/api/match/volunteers')

        assert response.status_code == 200
        assert response.get_json() == [
            {'id': 'vol-new', 'name': 'New', 'location': 'Houston', 'skills': ['Lifting']},
            {'id': 'vol-old', 'name': 'Old', 'location': 'Houston', 'skills': []},
        ]

    def test_empty(self, client):
        assert client.get('/api/match/volunteers').get_json() == []

    def test_store_failure_is_opaque_500(self, client, monkeypatch):
        def boom():
            raise SQLAlchemyError('connection refused')
        monkeypatch.setattr(MatchingService, 'list_volunteers', staticmethod(boom))

        response = client.get('/api/match/volunteers')

        assert response.status_code == 500
        assert response.get_json() == {'error': 'list_volunteers_failed'}


class TestListEvents:

    def test_soonest_first(self, client, make_event):
        make_event('evt-late', name='Late', event_date=date(2025, 12, 1))
        make_event('evt-soon', name='Soon', required_skills=['Lifting'], urgency='High',
                   event_date=date(2025, 10, 1))

        body = client.get('/api/match/events').get_json()

        assert [e['id'] for e in body] == ['evt-soon', 'evt-late']
        assert body[0] == {
            'id': 'evt-soon',
            'name': 'Soon',
            'location': 'Houston',
            'requiredSkills': ['Lifting'],
            'date': '2025-10-01',
            'urgency': 'High',
        }

    def test_store_failure_is_opaque_500(self, client, monkeypatch):
        def boom():
            raise SQLAlchemyError('connection refused')
        monkeypatch.setattr(MatchingService, 'list_events', staticmethod(boom))

        response = client.get('/api/match/events')

        assert response.status_code == 500
        assert response.get_json() == {'error': 'list_events_failed'}


class TestRankForVolunteer:

    def _seed(self, make_volunteer, make_event):
        make_volunteer('vol-1', location='Houston', skills=['First Aid', 'Lifting'])
        make_event('evt-lift', location='Austin', required_skills=['Lifting'], urgency='Low',
                   event_date=date(2025, 11, 1))
        make_event('evt-aid', location='Houston', required_skills=['First Aid', 'Teamwork'],
                   urgency='High', event_date=date(2025, 11, 2))
        make_event('evt-cook', location='Houston', required_skills=['Cooking'],
                   urgency='Critical', event_date=date(2025, 11, 3))

    def test_ranked_best_first_without_non_matches(self, client, make_volunteer, make_event):
        self._seed(make_volunteer, make_event)

        body = client.get('/api/match/volunteer/vol-1').get_json()

        assert [(r['event']['id'], r['score']) for r in body] == [
            ('evt-aid', 65.0),
            ('evt-lift', 60.0),
        ]
        assert body[0]['event']['date'] == '2025-11-02'

    def test_top_n_truncates(self, client, make_volunteer, make_event):
        self._seed(make_volunteer, make_event)

        body = client.get('/api/match/volunteer/vol-1?topN=1').get_json()

        assert [r['event']['id'] for r in body] == ['evt-aid']

    def test_unknown_volunteer_is_404(self, client, make_event):
        make_event('evt-1', required_skills=['Lifting'])

        response = client.get('/api/match/volunteer/nobody')

        assert response.status_code == 404
        assert response.get_json() == {'error': 'volunteer not found'}

    def test_invalid_top_n_is_400(self, client, make_volunteer):
        make_volunteer('vol-1')

        for value in ('abc', '-1', '1.5'):
            response = client.get(f'/api/match/volunteer/vol-1?topN={value}')
            assert response.status_code == 400
            assert 'error' in response.get_json()

    def test_store_failure_is_opaque_500(self, client, monkeypatch):
        def boom(volunteer_id, top_n=None):
            raise SQLAlchemyError('connection refused')
        monkeypatch.setattr(MatchingService, 'rank_for_volunteer', staticmethod(boom))

        response = client.get('/api/match/volunteer/vol-1')

        assert response.status_code == 500
        assert response.get_json() == {'error': 'rank_failed'}


def test_unknown_api_route_returns_json_error(client):
    response = client.get('/api/match/nothing-here')
    assert response.status_code == 404
    assert 'error' in response.get_json()


def test_unknown_volunteer_raises_not_found(app):
    with pytest.raises(NotFoundError) as excinfo:
        MatchingService.rank_for_volunteer('nobody')

    assert excinfo.value.entity == 'volunteer'
    assert excinfo.value.identifier == 'nobody'
    assert str(excinfo.value) == "volunteer 'nobody' not found"
