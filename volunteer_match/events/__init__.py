from flask import Blueprint

bp = Blueprint('events', __name__)

from volunteer_match.events import routes
