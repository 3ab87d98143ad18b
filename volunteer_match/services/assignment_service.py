"""
Assignment service for the volunteer matching platform.

Creates volunteer-event assignments and the notice that announces them.
"""

from flask import current_app
from volunteer_match import db
from volunteer_match.models import Assignment, VolunteerProfile, EventDetails
from volunteer_match.exceptions import NotFoundError
from volunteer_match.services.notification_service import NotificationService


class AssignmentService:
    """Service class for assignment operations."""

    @staticmethod
    def assign_volunteer(volunteer_id, event_id):
        """
        Assign a volunteer to an event and notify them.

        The assignment and its notice are committed separately; if the
        notice fails the assignment remains.

        Args:
            volunteer_id: The volunteer's user id
            event_id: The event id

        Returns:
            The created Assignment

        Raises:
            NotFoundError: If the volunteer or the event does not exist
        """
        volunteer = VolunteerProfile.get_by_user_id(volunteer_id)
        event = db.session.get(EventDetails, event_id)

        if not volunteer:
            raise NotFoundError('volunteer', volunteer_id)
        if not event:
            raise NotFoundError('event', event_id)

        assignment = Assignment(volunteer_id=volunteer.user_id, event_id=event.id)
        db.session.add(assignment)
        db.session.commit()

        current_app.logger.info(
            f"Assignment {assignment.id} created: volunteer {volunteer.user_id} -> event {event.id}"
        )

        NotificationService.notify_volunteer_assignment(volunteer, event)

        return assignment
