"""
Admin Routes

Dashboard plus member creation and deletion.
"""

import logging

from flask import current_app, flash, redirect, render_template, request, url_for
from flask_login import current_user

from member_directory.admin import admin_bp
from member_directory.admin.decorators import admin_required
from member_directory.errors import StorageError
from member_directory.services import create_member, delete_member as remove_member, list_members, save_photo

logger = logging.getLogger(__name__)


@admin_bp.route('/dashboard')
@admin_required
def dashboard():
    """Admin dashboard: identity plus the full member list."""
    try:
        members = list_members()
    except StorageError:
        logger.exception('Error fetching members')
        return 'Database error.', 500

    return render_template('admin/dashboard.html', admin=current_user, members=members)


@admin_bp.route('/members', methods=['POST'])
@admin_required
def add_member():
    """Add a member with an optional photo."""
    photo = save_photo(request.files.get('photo'), current_app.config['UPLOAD_FOLDER'])

    try:
        member = create_member(
            name=request.form.get('name'),
            role=request.form.get('role'),
            contact=request.form.get('contact'),
            photo=photo,
        )
    except StorageError:
        logger.exception('Error adding member')
        return 'Database error.', 500

    flash(f'Member "{member.name}" added.', 'success')
    return redirect(url_for('admin.dashboard'))


@admin_bp.route('/members/<int:member_id>', methods=['DELETE'])
@admin_required
def delete_member(member_id):
    """Delete a member; an unknown id still redirects."""
    try:
        remove_member(member_id)
    except StorageError:
        logger.exception('Error deleting member with ID %s', member_id)
        return 'Failed to delete member.', 500

    return redirect(url_for('admin.dashboard'))
