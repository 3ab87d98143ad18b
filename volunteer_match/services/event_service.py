"""
Event management service for the volunteer matching platform.

This module provides create, update, delete and listing of volunteer events.
"""

from typing import Dict, List
from volunteer_match import db
from volunteer_match.models import EventDetails
from volunteer_match.exceptions import NotFoundError


class EventService:
    """Service class for event management."""

    # Form field -> model attribute
    FIELD_MAP = {
        'name': 'event_name',
        'description': 'description',
        'location': 'location',
        'required_skills': 'required_skills',
        'urgency': 'urgency',
        'event_date': 'event_date'
    }

    @staticmethod
    def list_events() -> List[EventDetails]:
        """Get all events ordered by date, then name."""
        return EventDetails.query.order_by(
            EventDetails.event_date.asc(), EventDetails.event_name.asc()
        ).all()

    @staticmethod
    def get_event(event_id) -> EventDetails:
        event = db.session.get(EventDetails, event_id)
        if not event:
            raise NotFoundError('event', event_id)
        return event

    @staticmethod
    def create_event(event_data: Dict) -> EventDetails:
        """
        Create a new event.

        Args:
            event_data: Validated event fields keyed by form field name

        Returns:
            Created EventDetails object
        """
        try:
            event = EventDetails(**EventService._to_columns(event_data))
            db.session.add(event)
            db.session.commit()
            return event
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def update_event(event_id, event_data: Dict) -> EventDetails:
        """
        Replace the editable fields of an existing event.

        Raises:
            NotFoundError: If the event does not exist
        """
        try:
            event = EventService.get_event(event_id)
            for column, value in EventService._to_columns(event_data).items():
                setattr(event, column, value)
            db.session.commit()
            return event
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def delete_event(event_id):
        """
        Delete an event together with its assignments.

        Raises:
            NotFoundError: If the event does not exist
        """
        try:
            event = EventService.get_event(event_id)
            db.session.delete(event)
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise

    @staticmethod
    def _to_columns(event_data: Dict) -> Dict:
        return {
            column: event_data[field]
            for field, column in EventService.FIELD_MAP.items()
            if field in event_data
        }
