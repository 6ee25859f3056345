"""
Directory Blueprint

Public pages: members grouped by role and uploaded photos.
"""

from flask import Blueprint

directory_bp = Blueprint('directory', __name__)

from member_directory.directory import routes  # noqa: E402, F401
