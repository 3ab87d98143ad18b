import uuid
from datetime import datetime, timezone
from volunteer_match import db

URGENCY_LEVELS = ('Low', 'Medium', 'High', 'Critical')


def _new_id():
    return uuid.uuid4().hex


class EventDetails(db.Model):
    """Volunteer event with its skill requirements."""

    __tablename__ = 'event_details'

    id = db.Column(db.String(64), primary_key=True, default=_new_id)
    event_name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text, nullable=False)
    location = db.Column(db.String(300), nullable=False)
    required_skills = db.Column(db.JSON, default=list)
    urgency = db.Column(db.Enum(*URGENCY_LEVELS, name='urgency_levels'), nullable=False)
    event_date = db.Column(db.Date, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc),
                           onupdate=lambda: datetime.now(timezone.utc))

    # Relationships
    assignments = db.relationship('Assignment', backref='event',
                                  cascade='all, delete-orphan')

    def __init__(self, **kwargs):
        super(EventDetails, self).__init__(**kwargs)

    @property
    def required_skills_list(self):
        """Get required skills as a list, whatever was stored."""
        return list(self.required_skills) if isinstance(self.required_skills, list) else []

    def to_dict(self):
        """Convert event to the representation used by the events resource."""
        return {
            'id': self.id,
            'name': self.event_name,
            'description': self.description,
            'location': self.location,
            'requiredSkills': self.required_skills_list,
            'urgency': self.urgency,
            'eventDate': self.event_date.isoformat() if self.event_date else None
        }

    def __repr__(self):
        return f'<EventDetails {self.event_name} ({self.urgency})>'
