"""
Admin Blueprint

Dashboard and member management. Every route here sits behind the
admin session check in decorators.py.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from member_directory.admin import routes  # noqa: E402, F401
