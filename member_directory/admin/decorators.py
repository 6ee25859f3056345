"""
Admin Decorator

The admin session marker is the Flask-Login identity stored in the
session; its presence is the only authorization check.
"""

from functools import wraps
from flask import redirect, url_for
from flask_login import current_user


def require_admin(identity):
    """Return a redirect to the login page unless `identity` is a logged-in admin.

    A missing identity is ordinary control flow, not an error: the caller
    returns the redirect instead of running the view.
    """
    if identity is None or not identity.is_authenticated:
        return redirect(url_for('auth.login'))
    return None


def admin_required(f):
    """Decorator to ensure the request is from an authenticated admin."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        denied = require_admin(current_user)
        if denied is not None:
            return denied
        return f(*args, **kwargs)
    return wrapper
