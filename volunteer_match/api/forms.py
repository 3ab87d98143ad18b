"""
Matching API forms.
"""

from wtforms import StringField
from wtforms.validators import DataRequired, Length
from volunteer_match.forms import JsonForm, strip_value


class AssignForm(JsonForm):
    """Body of an assignment request."""
    volunteer_id = StringField('Volunteer', name='volunteerId', filters=[strip_value], validators=[
        DataRequired(message='volunteerId is required'),
        Length(max=64, message='volunteerId must be at most 64 characters')
    ])
    event_id = StringField('Event', name='eventId', filters=[strip_value], validators=[
        DataRequired(message='eventId is required'),
        Length(max=64, message='eventId must be at most 64 characters')
    ])
