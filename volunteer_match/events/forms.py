"""
Event management forms.
"""

from datetime import datetime
from wtforms import StringField, TextAreaField, SelectField
from wtforms.validators import DataRequired, Length, AnyOf, ValidationError
from volunteer_match.forms import JsonForm, TagListField, strip_value
from volunteer_match.models import URGENCY_LEVELS

DATE_FORMAT = '%Y-%m-%d'


def valid_date(form, field):
    try:
        datetime.strptime(field.data, DATE_FORMAT)
    except (TypeError, ValueError):
        raise ValidationError('Event Date must be a valid date (YYYY-MM-DD).')


def at_least_one(message):
    def _at_least_one(form, field):
        if not field.data:
            raise ValidationError(message)
    return _at_least_one


class EventForm(JsonForm):
    """Form for creating and editing events."""
    name = StringField('Event Name', filters=[strip_value], validators=[
        DataRequired(message='Event Name is required.'),
        Length(max=100, message='Event Name must be ≤ 100 characters.')
    ])
    description = TextAreaField('Event Description', filters=[strip_value], validators=[
        DataRequired(message='Event Description is required.')
    ])
    location = StringField('Location', filters=[strip_value], validators=[
        DataRequired(message='Location is required.'),
        Length(max=300, message='Location must be ≤ 300 characters.')
    ])
    required_skills = TagListField('Required Skills', name='requiredSkills', validators=[
        at_least_one('Select at least one Required Skill.')
    ])
    urgency = SelectField('Urgency', choices=[(u, u) for u in URGENCY_LEVELS],
                          validate_choice=False, validators=[
        DataRequired(message='Urgency is required.'),
        AnyOf(URGENCY_LEVELS, message='Urgency must be one of: ' + ', '.join(URGENCY_LEVELS) + '.')
    ])
    event_date = StringField('Event Date', name='eventDate', filters=[strip_value], validators=[
        DataRequired(message='Event Date is required.'),
        valid_date
    ])

    def to_event_data(self):
        """Validated fields ready for the event service."""
        return {
            'name': self.name.data,
            'description': self.description.data,
            'location': self.location.data,
            'required_skills': list(self.required_skills.data),
            'urgency': self.urgency.data,
            'event_date': datetime.strptime(self.event_date.data, DATE_FORMAT).date()
        }
