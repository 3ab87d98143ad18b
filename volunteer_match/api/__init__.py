from flask import Blueprint

bp = Blueprint('matching', __name__)

from volunteer_match.api import routes
