import os

basedir = os.path.abspath(os.path.dirname(__file__))


def _split_origins(value):
    return [origin.strip() for origin in value.split(',') if origin.strip()]


class Config:
    """Base configuration shared by every environment."""

    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-me'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'volunteer_match.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    CORS_ORIGINS = _split_origins(os.environ.get(
        'CORS_ORIGINS',
        'http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173'
    ))

    # Seconds between keepalive comments on an idle notice stream
    SSE_HEARTBEAT_SECONDS = int(os.environ.get('SSE_HEARTBEAT_SECONDS', 15))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # The JSON API has no cookie session to protect
    WTF_CSRF_ENABLED = False

    # Placeholder password given to seeded demo credentials
    DEMO_PASSWORD = os.environ.get('DEMO_PASSWORD', 'demo')


class DevelopmentConfig(Config):
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SSE_HEARTBEAT_SECONDS = 1


class ProductionConfig(Config):
    DEBUG = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING')


config = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig
}
