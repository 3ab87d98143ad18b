#!/usr/bin/env python3
"""
Volunteer Match - Application Entry Point

This script creates and runs the Flask application using the application factory pattern.
It handles environment configuration and provides CLI commands for database management.
"""

import atexit
import os
import sys
from flask.cli import with_appcontext
import click
from volunteer_match import create_app, db, shutdown

# Create application instance
app = create_app(os.getenv('FLASK_CONFIG') or 'default')
atexit.register(shutdown, app)


def _run_seed():
    from scripts.seed import seed_all
    try:
        seed_all()
    except Exception as e:
        click.echo(f'Error seeding database: {e}', err=True)
        sys.exit(1)


@app.cli.command('init-db')
@with_appcontext
def init_db():
    """Initialize the database with tables and demo data."""
    click.echo('Creating database tables...')
    db.create_all()
    _run_seed()
    click.echo('Database initialized successfully!')


@app.cli.command('seed')
@with_appcontext
def seed():
    """Upsert reference states and demo volunteers/events."""
    _run_seed()
    click.echo('Database seeded successfully!')


@app.cli.command('reset-db')
@with_appcontext
def reset_db():
    """Reset the database (drop all tables and recreate)."""
    if click.confirm('This will delete all data. Are you sure?'):
        click.echo('Dropping all tables...')
        db.drop_all()
        click.echo('Creating database tables...')
        db.create_all()
        _run_seed()
        click.echo('Database reset successfully!')


@app.shell_context_processor
def make_shell_context():
    """Make database and models available in Flask shell."""
    from volunteer_match.models import (
        UserCredentials, VolunteerProfile, EventDetails, Assignment, Notice, ReferenceState
    )
    return {
        'db': db,
        'UserCredentials': UserCredentials,
        'VolunteerProfile': VolunteerProfile,
        'EventDetails': EventDetails,
        'Assignment': Assignment,
        'Notice': Notice,
        'ReferenceState': ReferenceState
    }


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    app.run(debug=False, host='0.0.0.0', port=port, threaded=True)
