from volunteer_match import db


class ReferenceState(db.Model):
    """Static lookup of US state codes."""

    __tablename__ = 'states'

    state_code = db.Column(db.String(2), primary_key=True)
    state_name = db.Column(db.String(50), nullable=False)

    def __repr__(self):
        return f'<ReferenceState {self.state_code}>'
