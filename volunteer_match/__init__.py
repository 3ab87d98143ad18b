from flask import Flask, jsonify, request
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
from config import config

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()

BUS_EXTENSION_KEY = 'notification_bus'


def create_app(config_name='default', bus=None):
    """Application factory pattern.

    ``bus`` replaces the notification bus the app would otherwise create,
    so tests can observe publications.
    """
    app = Flask(__name__)
    app.config.from_object(config[config_name])
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions with app
    db.init_app(app)
    migrate.init_app(app, db)
    CORS(app, origins=app.config['CORS_ORIGINS'])

    from volunteer_match.services.notification_service import NotificationBus
    app.extensions[BUS_EXTENSION_KEY] = bus if bus is not None else NotificationBus()

    # Register API blueprints
    from volunteer_match.api import bp as matching_bp
    app.register_blueprint(matching_bp, url_prefix='/api/match')

    from volunteer_match.events import bp as events_bp
    app.register_blueprint(events_bp, url_prefix='/api/events')

    from volunteer_match.notices import bp as notices_bp
    app.register_blueprint(notices_bp, url_prefix='/api/notices')

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        if request.path.startswith('/api/'):
            return jsonify({'error': error.description}), error.code
        return error

    return app


def get_bus(app):
    """Return the notification bus bound to ``app``."""
    return app.extensions[BUS_EXTENSION_KEY]


def shutdown(app):
    """Release process-wide resources held by ``app``."""
    get_bus(app).close()
    with app.app_context():
        db.session.remove()
        db.engine.dispose()
    app.logger.info('Application resources released')


# Import models to ensure they are registered with SQLAlchemy
from volunteer_match import models
