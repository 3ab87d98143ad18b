import uuid
from volunteer_match import db
from volunteer_match.models.assignment import epoch_ms


class Notice(db.Model):
    """User-facing notification delivered to a volunteer."""

    __tablename__ = 'notices'

    id = db.Column(db.String(64), primary_key=True, default=lambda: uuid.uuid4().hex)
    volunteer_id = db.Column(db.String(64), db.ForeignKey('user_profiles.user_id'), nullable=False)
    title = db.Column(db.String(200), nullable=False)
    body = db.Column(db.Text, nullable=False)
    type = db.Column(db.String(20), nullable=False, default='info')
    created_at_ms = db.Column(db.BigInteger, default=epoch_ms, nullable=False)

    __table_args__ = (
        db.Index('idx_notice_volunteer_created', 'volunteer_id', 'created_at_ms'),
    )

    def __init__(self, **kwargs):
        super(Notice, self).__init__(**kwargs)

    @staticmethod
    def get_for_volunteer(volunteer_id, limit=None):
        """Get notices for a volunteer, newest first."""
        query = Notice.query.filter_by(volunteer_id=volunteer_id).order_by(
            Notice.created_at_ms.desc(), Notice.id
        )

        if limit:
            query = query.limit(limit)

        return query.all()

    def __repr__(self):
        return f'<Notice {self.volunteer_id}: {self.title}>'
