"""
Flask Extensions

The database handle and the login manager are created unbound here and
attached to an application inside create_app().
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Session-based admin authentication
login_manager = LoginManager()
