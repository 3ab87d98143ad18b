"""
Service-layer exceptions for the volunteer matching platform.
"""


class NotFoundError(Exception):
    """Raised when a volunteer, event or other record does not exist."""

    def __init__(self, entity, identifier=None):
        self.entity = entity
        self.identifier = identifier
        super().__init__(f'{entity} not found' if identifier is None
                         else f'{entity} {identifier!r} not found')
