"""
Matching API routes for the volunteer matching platform.

This module exposes volunteer and event listings, event ranking for a
volunteer, and assignment creation.
"""

from flask import request, jsonify, current_app
from volunteer_match import db
from volunteer_match.api import bp
from volunteer_match.api.forms import AssignForm
from volunteer_match.exceptions import NotFoundError
from volunteer_match.services.assignment_service import AssignmentService
from volunteer_match.services.dto import to_assignment_payload
from volunteer_match.services.matching_service import MatchingService


def _parse_top_n(value):
    """Parse the ``topN`` query value; None means unlimited."""
    if value is None or value == '':
        return None
    top_n = int(value)
    if top_n < 0:
        raise ValueError('topN must not be negative')
    return top_n


@bp.route('/volunteers', methods=['GET'])
def list_volunteers():
    """List volunteers, newest first."""
    try:
        return jsonify(MatchingService.list_volunteers())
    except Exception as e:
        current_app.logger.error(f"Error listing volunteers: {str(e)}")
        return jsonify({'error': 'list_volunteers_failed'}), 500


@bp.route('/events', methods=['GET'])
def list_events():
    """List events, soonest first."""
    try:
        return jsonify(MatchingService.list_events())
    except Exception as e:
        current_app.logger.error(f"Error listing events: {str(e)}")
        return jsonify({'error': 'list_events_failed'}), 500


@bp.route('/volunteer/<volunteer_id>', methods=['GET'])
def rank_for_volunteer(volunteer_id):
    """Rank events for a volunteer."""
    try:
        top_n = _parse_top_n(request.args.get('topN'))
    except ValueError:
        return jsonify({'error': 'topN must be a non-negative integer'}), 400

    try:
        ranked = MatchingService.rank_for_volunteer(volunteer_id, top_n)
        return jsonify(ranked)
    except NotFoundError:
        return jsonify({'error': 'volunteer not found'}), 404
    except Exception as e:
        current_app.logger.error(f"Error ranking events for volunteer {volunteer_id}: {str(e)}")
        return jsonify({'error': 'rank_failed'}), 500


@bp.route('/assign', methods=['POST'])
def assign():
    """Assign a volunteer to an event."""
    form = AssignForm.from_request()
    if not form.validate():
        return jsonify({
            'error': 'volunteerId and eventId required',
            'details': form.error_details()
        }), 400

    try:
        assignment = AssignmentService.assign_volunteer(form.volunteer_id.data, form.event_id.data)
        return jsonify({'ok': True, 'assignment': to_assignment_payload(assignment)})
    except NotFoundError:
        return jsonify({'error': 'not found'}), 404
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Error assigning volunteer: {str(e)}")
        return jsonify({'error': 'assign_failed'}), 500


@bp.route('/health')
def health():
    """Liveness probe."""
    return jsonify({'ok': True})
