"""
Member Directory - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os
import sys

from flask import Flask
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from member_directory.config import Config
from member_directory.errors import StorageError
from member_directory.extensions import db, login_manager
from member_directory.middleware import MethodOverrideMiddleware

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance

    The process exits if the database cannot be reached.
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    _configure_logging(app)

    # Forms post `?_method=DELETE` to delete members
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)

    # Register blueprints
    from member_directory.auth import auth_bp
    from member_directory.admin import admin_bp
    from member_directory.directory import directory_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(directory_bp)

    # User loader for Flask-Login
    from member_directory.services import load_admin
    login_manager.user_loader(load_admin)

    @app.errorhandler(StorageError)
    def storage_error(e):
        logger.error('Unhandled storage error: %s', e)
        return 'Database error.', 500

    os.makedirs(app.instance_path, exist_ok=True)
    os.makedirs(app.config['UPLOAD_FOLDER'], exist_ok=True)

    with app.app_context():
        _connect_database()
        db.create_all()

    return app


def _connect_database():
    """Check the database is reachable; exit the process if it is not."""
    try:
        with db.engine.connect() as conn:
            conn.execute(text('SELECT 1'))
    except SQLAlchemyError as e:
        logger.critical('Database connection error: %s', e)
        sys.exit(1)
    logger.info('Connected to database %s', db.engine.url.render_as_string(hide_password=True))


def _configure_logging(app):
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    logging.getLogger('member_directory').setLevel(level)
    logging.getLogger('sqlalchemy').setLevel(logging.WARNING)
