"""
Shared form plumbing for the JSON API.
"""

from flask import request
from flask_wtf import FlaskForm
from werkzeug.datastructures import ImmutableMultiDict
from wtforms import Field
from wtforms.widgets import TextInput


def strip_value(value):
    """Coerce JSON scalars to trimmed strings, leaving missing values alone."""
    if value is None:
        return None
    return str(value).strip()


class TagListField(Field):
    """Field holding a list of non-empty strings, such as skill tags."""
    widget = TextInput()

    def process_formdata(self, valuelist):
        self.data = [v for v in (strip_value(value) for value in valuelist) if v]

    def _value(self):
        return ', '.join(self.data or [])


class JsonForm(FlaskForm):
    """Form populated from a JSON request body."""

    class Meta:
        csrf = False

    @classmethod
    def from_request(cls):
        """Build the form from the current JSON body; anything but an object counts as empty."""
        payload = request.get_json(silent=True)
        return cls(formdata=ImmutableMultiDict(payload if isinstance(payload, dict) else {}))

    def error_details(self):
        """Validation messages keyed by the JSON field name."""
        return {field.name: list(field.errors) for field in self if field.errors}

    def first_error(self):
        for field in self:
            if field.errors:
                return field.errors[0]
        return None
