from flask import Blueprint

bp = Blueprint('notices', __name__)

from volunteer_match.notices import routes
