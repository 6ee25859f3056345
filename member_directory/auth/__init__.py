"""
Auth Blueprint

Admin login, registration and logout.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from member_directory.auth import routes  # noqa: E402, F401
