import time
import uuid
from volunteer_match import db


def epoch_ms():
    """Current time as integer epoch milliseconds."""
    return int(time.time() * 1000)


class Assignment(db.Model):
    """Assignment linking a volunteer to an event."""

    __tablename__ = 'assignments'

    id = db.Column(db.String(64), primary_key=True, default=lambda: uuid.uuid4().hex)
    volunteer_id = db.Column(db.String(64), db.ForeignKey('user_profiles.user_id'), nullable=False)
    event_id = db.Column(db.String(64), db.ForeignKey('event_details.id'), nullable=False)
    created_at_ms = db.Column(db.BigInteger, default=epoch_ms, nullable=False)

    # Repeated assignment of the same pair is allowed
    __table_args__ = (
        db.Index('idx_assignment_volunteer', 'volunteer_id'),
        db.Index('idx_assignment_event', 'event_id'),
    )

    def __init__(self, **kwargs):
        super(Assignment, self).__init__(**kwargs)

    def __repr__(self):
        return f'<Assignment {self.volunteer_id}:{self.event_id}>'
