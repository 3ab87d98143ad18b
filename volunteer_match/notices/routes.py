"""
Notice history and live notice stream for volunteers.
"""

import json
import queue

from flask import Response, jsonify, current_app
from volunteer_match import get_bus
from volunteer_match.models import VolunteerProfile
from volunteer_match.notices import bp
from volunteer_match.services.notification_service import (
    NotificationService, END_OF_STREAM, notice_channel
)


def format_sse(data, event=None):
    """Format one server-sent-events frame."""
    frame = ''
    if event:
        frame += f'event: {event}\n'
    frame += f'data: {json.dumps(data)}\n\n'
    return frame


def stream_notices(bus, channel, heartbeat_seconds, logger):
    """Yield SSE frames for one subscriber until the bus closes or the client leaves.

    The subscription starts with the first frame, so a body that is never
    iterated (HEAD requests) never registers a queue.
    """
    subscriber = bus.subscribe(channel)
    logger.info(f"Notice stream opened for {channel}")
    try:
        yield ': connected\n\n'
        while True:
            try:
                payload = subscriber.get(timeout=heartbeat_seconds)
            except queue.Empty:
                yield ': keepalive\n\n'
                continue
            if payload is END_OF_STREAM:
                break
            yield format_sse(payload, event='notice')
    finally:
        bus.unsubscribe(channel, subscriber)
        logger.info(f"Notice stream closed for {channel}")


@bp.route('/<volunteer_id>', methods=['GET'])
def list_notices(volunteer_id):
    """List persisted notices for a volunteer, newest first."""
    try:
        if not VolunteerProfile.get_by_user_id(volunteer_id):
            return jsonify({'error': 'volunteer not found'}), 404
        return jsonify({'data': NotificationService.get_volunteer_notices(volunteer_id)})
    except Exception as e:
        current_app.logger.error(f"Error loading notices for {volunteer_id}: {str(e)}")
        return jsonify({'error': 'list_notices_failed'}), 500


@bp.route('/<volunteer_id>/stream', methods=['GET'])
def notice_stream(volunteer_id):
    """Server-sent-events stream of notices published for a volunteer."""
    try:
        if not VolunteerProfile.get_by_user_id(volunteer_id):
            return jsonify({'error': 'volunteer not found'}), 404
    except Exception as e:
        current_app.logger.error(f"Error opening notice stream for {volunteer_id}: {str(e)}")
        return jsonify({'error': 'stream_failed'}), 500

    return Response(
        stream_notices(get_bus(current_app), notice_channel(volunteer_id),
                       current_app.config['SSE_HEARTBEAT_SECONDS'],
                       current_app.logger),
        mimetype='text/event-stream',
        headers={
            'Cache-Control': 'no-cache',
            'X-Accel-Buffering': 'no'
        }
    )
