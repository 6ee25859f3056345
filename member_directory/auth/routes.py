"""
Auth Routes

Admin authentication using Flask-Login for the session marker.
"""

import logging

from flask import flash, redirect, render_template, request, session, url_for
from flask_login import login_user, logout_user

from member_directory.auth import auth_bp
from member_directory.errors import AuthError, HashError, StorageError
from member_directory.services import authenticate_admin, register_admin

logger = logging.getLogger(__name__)


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login route"""
    if request.method == 'GET':
        return render_template('auth/login.html')

    username = request.form.get('username', '')
    password = request.form.get('password', '')

    try:
        admin = authenticate_admin(username, password)
    except AuthError:
        logger.info('Failed login for %s', username)
        flash('Invalid username or password.', 'danger')
        return render_template('auth/login.html'), 401
    except StorageError:
        logger.exception('Login lookup failed')
        return 'Database error.', 500

    session.clear()
    login_user(admin)
    flash(f'Welcome, {admin.username}!', 'success')
    return redirect(url_for('admin.dashboard'))


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    """Admin registration route"""
    if request.method == 'GET':
        return render_template('auth/register.html')

    username = request.form.get('username', '')
    password = request.form.get('password', '')

    try:
        register_admin(username, password)
    except HashError:
        logger.exception('Password hashing failed')
        return 'Server error.', 500
    except StorageError:
        logger.exception('Registration failed')
        return 'Database error.', 500

    flash('Registration successful! Please login.', 'success')
    return redirect(url_for('auth.login'))


@auth_bp.route('/logout')
def logout():
    """Admin logout - clears the session marker."""
    logout_user()
    session.clear()
    flash('You have been logged out.', 'info')
    return redirect(url_for('auth.login'))
