"""
Directory Routes
"""

import logging

from flask import current_app, render_template, send_from_directory

from member_directory.directory import directory_bp
from member_directory.errors import StorageError
from member_directory.services import list_members_grouped_by_role

logger = logging.getLogger(__name__)


@directory_bp.route('/')
def index():
    """Home page displaying members categorized by role"""
    try:
        categorized_members = list_members_grouped_by_role()
    except StorageError:
        logger.exception('Error fetching members')
        return 'Database error.', 500

    return render_template('index.html', categorized_members=categorized_members)


@directory_bp.route('/uploads/<path:filename>')
def uploaded_file(filename):
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
