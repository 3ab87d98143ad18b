"""
Mapping from stored rows to the records exposed by the API.
"""

from typing import List, TypedDict

from volunteer_match.models import VolunteerProfile, EventDetails, Assignment, Notice


class VolunteerDTO(TypedDict):
    id: str
    name: str
    location: str
    skills: List[str]


class EventDTO(TypedDict):
    id: str
    name: str
    location: str
    requiredSkills: List[str]
    date: str
    urgency: str


class NoticePayload(TypedDict):
    id: str
    volunteerId: str
    title: str
    body: str
    type: str
    createdAtMs: int


class AssignmentPayload(TypedDict):
    id: str
    volunteerId: str
    eventId: str
    createdAtMs: int


def _as_list(value) -> List[str]:
    return list(value) if isinstance(value, list) else []


def to_volunteer_dto(profile: VolunteerProfile) -> VolunteerDTO:
    # Clients address volunteers by their user id
    return {
        'id': profile.user_id,
        'name': profile.full_name,
        'location': profile.city,
        'skills': _as_list(profile.skills),
    }


def to_event_dto(event: EventDetails) -> EventDTO:
    return {
        'id': event.id,
        'name': event.event_name,
        'location': event.location,
        'requiredSkills': _as_list(event.required_skills),
        'date': event.event_date.strftime('%Y-%m-%d') if event.event_date else None,
        'urgency': event.urgency,
    }


def to_notice_payload(notice: Notice) -> NoticePayload:
    return {
        'id': notice.id,
        'volunteerId': notice.volunteer_id,
        'title': notice.title,
        'body': notice.body,
        'type': notice.type,
        'createdAtMs': int(notice.created_at_ms or 0),
    }


def to_assignment_payload(assignment: Assignment) -> AssignmentPayload:
    return {
        'id': assignment.id,
        'volunteerId': assignment.volunteer_id,
        'eventId': assignment.event_id,
        'createdAtMs': int(assignment.created_at_ms or 0),
    }
