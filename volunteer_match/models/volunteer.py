from datetime import datetime, timezone
from werkzeug.security import generate_password_hash, check_password_hash
from volunteer_match import db


class UserCredentials(db.Model):
    """Login credentials for a volunteer account."""

    __tablename__ = 'user_credentials'

    user_id = db.Column(db.String(64), primary_key=True)
    password_hash = db.Column(db.String(255), nullable=False)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc))

    # Relationships
    profile = db.relationship('VolunteerProfile', backref='credentials', uselist=False,
                              cascade='all, delete-orphan')

    def __init__(self, **kwargs):
        super(UserCredentials, self).__init__(**kwargs)

    def set_password(self, password):
        """Hash and set the user's password."""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """Check if the provided password matches the stored hash."""
        return check_password_hash(self.password_hash, password)

    def __repr__(self):
        return f'<UserCredentials {self.user_id}>'


class VolunteerProfile(db.Model):
    """Volunteer profile with address, skills and availability."""

    __tablename__ = 'user_profiles'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), db.ForeignKey('user_credentials.user_id'),
                        unique=True, nullable=False)
    full_name = db.Column(db.String(200), nullable=False)
    address1 = db.Column(db.String(200))
    address2 = db.Column(db.String(200))
    city = db.Column(db.String(100))
    state = db.Column(db.String(2), db.ForeignKey('states.state_code'))
    zip_code = db.Column(db.String(10))
    skills = db.Column(db.JSON, default=list)
    availability = db.Column(db.JSON, default=list)
    preferences = db.Column(db.Text)
    created_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc), index=True)
    updated_at = db.Column(db.DateTime, default=lambda: datetime.now(timezone.utc),
                           onupdate=lambda: datetime.now(timezone.utc))

    # Relationships
    assignments = db.relationship('Assignment', backref='volunteer_profile',
                                  cascade='all, delete-orphan')
    notices = db.relationship('Notice', backref='volunteer_profile',
                              cascade='all, delete-orphan')

    def __init__(self, **kwargs):
        super(VolunteerProfile, self).__init__(**kwargs)

    @staticmethod
    def get_by_user_id(user_id):
        """Get a profile by its owning user id."""
        return VolunteerProfile.query.filter_by(user_id=user_id).first()

    def __repr__(self):
        return f'<VolunteerProfile {self.full_name} ({self.user_id})>'
