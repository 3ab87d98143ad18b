# Import all models to ensure they are registered with SQLAlchemy
from volunteer_match.models.volunteer import UserCredentials, VolunteerProfile
from volunteer_match.models.event import EventDetails, URGENCY_LEVELS
from volunteer_match.models.assignment import Assignment
from volunteer_match.models.notice import Notice
from volunteer_match.models.state import ReferenceState
