"""
Volunteer matching service for the volunteer matching platform.

This module lists volunteers and events in their interface shape and ranks
events for a volunteer by compatibility score.
"""

from typing import List, Dict, Optional
from volunteer_match.models import VolunteerProfile, EventDetails
from volunteer_match.exceptions import NotFoundError
from volunteer_match.services.dto import to_volunteer_dto, to_event_dto
from volunteer_match.services.scoring import score


class MatchingService:
    """Service class for volunteer-event matching operations."""

    @staticmethod
    def list_volunteers() -> List[Dict]:
        """Get all volunteers, newest first."""
        profiles = VolunteerProfile.query.order_by(
            VolunteerProfile.created_at.desc(), VolunteerProfile.user_id
        ).all()
        return [to_volunteer_dto(p) for p in profiles]

    @staticmethod
    def list_events() -> List[Dict]:
        """Get all events, soonest first."""
        return [to_event_dto(e) for e in MatchingService._events_in_date_order()]

    @staticmethod
    def rank_for_volunteer(volunteer_id: str, top_n: Optional[int] = None) -> List[Dict]:
        """
        Rank events for a volunteer by compatibility score.

        Args:
            volunteer_id: The volunteer's user id
            top_n: Maximum number of events to return (all when None)

        Returns:
            List of ``{'event': EventDTO, 'score': float}``, best first.
            Events scoring zero or less are left out.

        Raises:
            NotFoundError: If the volunteer does not exist
        """
        volunteer = VolunteerProfile.get_by_user_id(volunteer_id)
        if not volunteer:
            raise NotFoundError('volunteer', volunteer_id)

        return MatchingService.rank_events(
            to_volunteer_dto(volunteer),
            [to_event_dto(e) for e in MatchingService._events_in_date_order()],
            top_n
        )

    @staticmethod
    def rank_events(volunteer: Dict, events: List[Dict],
                    top_n: Optional[int] = None) -> List[Dict]:
        """
        Score, filter, sort and truncate events for one volunteer DTO.

        The sort is stable, so events with equal scores keep their input order.
        """
        event_matches = []
        for event in events:
            match_score = score(volunteer, event)
            if match_score <= 0:
                continue
            event_matches.append({'event': event, 'score': match_score})

        # Sort by match score (highest first)
        event_matches.sort(key=lambda x: x['score'], reverse=True)

        if top_n is not None:
            event_matches = event_matches[:top_n]

        return event_matches

    @staticmethod
    def _events_in_date_order():
        return EventDetails.query.order_by(
            EventDetails.event_date.asc(), EventDetails.id.asc()
        ).all()
