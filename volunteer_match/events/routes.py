"""
Event management routes.

Every response carries either ``data`` or ``error``.
"""

from flask import jsonify, current_app
from volunteer_match.events import bp
from volunteer_match.events.forms import EventForm
from volunteer_match.exceptions import NotFoundError
from volunteer_match.services.event_service import EventService


def api_response(data=None, error=None, status=200, details=None):
    """Standard events API response format."""
    if error is not None:
        response = {'error': error}
        if details:
            response['details'] = details
    else:
        response = {'data': data}

    return jsonify(response), status


def _validation_failed(form):
    return api_response(error=form.first_error(), details=form.error_details(), status=400)


@bp.route('', methods=['GET'])
def list_events():
    """List all events."""
    try:
        return api_response([event.to_dict() for event in EventService.list_events()])
    except Exception as e:
        current_app.logger.error(f"Error loading events: {str(e)}")
        return api_response(error='Failed to load events.', status=500)


@bp.route('', methods=['POST'])
def create_event():
    """Create an event."""
    form = EventForm.from_request()
    if not form.validate():
        return _validation_failed(form)

    try:
        event = EventService.create_event(form.to_event_data())
        current_app.logger.info(f"Event {event.id} created")
        return api_response(event.to_dict(), status=201)
    except Exception as e:
        current_app.logger.error(f"Error creating event: {str(e)}")
        return api_response(error='Failed to save event.', status=500)


@bp.route('/<event_id>', methods=['PUT'])
def update_event(event_id):
    """Update an event."""
    form = EventForm.from_request()
    if not form.validate():
        return _validation_failed(form)

    try:
        event = EventService.update_event(event_id, form.to_event_data())
        return api_response(event.to_dict())
    except NotFoundError:
        return api_response(error='Event not found.', status=404)
    except Exception as e:
        current_app.logger.error(f"Error updating event {event_id}: {str(e)}")
        return api_response(error='Failed to save event.', status=500)


@bp.route('/<event_id>', methods=['DELETE'])
def delete_event(event_id):
    """Delete an event."""
    try:
        EventService.delete_event(event_id)
        current_app.logger.info(f"Event {event_id} deleted")
        return api_response({'id': event_id})
    except NotFoundError:
        return api_response(error='Event not found.', status=404)
    except Exception as e:
        current_app.logger.error(f"Error deleting event {event_id}: {str(e)}")
        return api_response(error='Failed to delete event.', status=500)
