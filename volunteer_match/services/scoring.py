"""
Volunteer/event compatibility scoring.

The score is a pure function of a volunteer DTO and an event DTO. Higher is a
better fit; anything at or below zero is not a match.

Score components:
- Skill coverage (share of required skills the volunteer has): 0-50 points
- Urgency (more urgent events surface first): 10-40 points
- Location (same city/location string): 0-10 points
"""

from typing import Dict, Iterable, Set

SKILL_POINTS = 50.0
NO_REQUIREMENT_SKILL_POINTS = 25.0
LOCATION_POINTS = 10.0

URGENCY_POINTS = {
    'low': 10.0,
    'medium': 20.0,
    'high': 30.0,
    'critical': 40.0
}


def _normalize(value) -> str:
    return str(value).strip().lower() if value is not None else ''


def _skill_set(skills: Iterable) -> Set[str]:
    if not isinstance(skills, (list, tuple, set)):
        return set()
    return {_normalize(skill) for skill in skills if _normalize(skill)}


def skill_overlap(volunteer: Dict, event: Dict) -> int:
    """Number of the event's required skills the volunteer has."""
    return len(_skill_set(volunteer.get('skills')) & _skill_set(event.get('requiredSkills')))


def score(volunteer: Dict, event: Dict) -> float:
    """
    Calculate a compatibility score for a volunteer-event pair.

    Args:
        volunteer: Volunteer DTO (``id``, ``name``, ``location``, ``skills``)
        event: Event DTO (``id``, ``name``, ``location``, ``requiredSkills``,
            ``date``, ``urgency``)

    Returns:
        Score between 0 and 100; 0 means the volunteer is not a match.
    """
    required = _skill_set(event.get('requiredSkills'))

    if required:
        matched = skill_overlap(volunteer, event)
        if not matched:
            return 0.0
        total = SKILL_POINTS * matched / len(required)
    else:
        total = NO_REQUIREMENT_SKILL_POINTS

    total += URGENCY_POINTS.get(_normalize(event.get('urgency')), 0.0)

    volunteer_location = _normalize(volunteer.get('location'))
    if volunteer_location and volunteer_location == _normalize(event.get('location')):
        total += LOCATION_POINTS

    # Ensure score is within bounds
    return round(max(0.0, min(100.0, total)), 2)
