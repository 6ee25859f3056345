"""
Admin Authentication

Registers administrators and checks their credentials against the
admins table. Issuing the session marker is left to the caller
(Flask-Login's login_user).
"""

import logging

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from member_directory.errors import AuthError, HashError, StorageError
from member_directory.extensions import db
from member_directory.models import Admin
from member_directory.services.passwords import DEFAULT_METHOD, hash_password, verify_password

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = 'invalid credentials'


def register_admin(username, password):
    """Hash the password and insert a new admin row.

    No uniqueness check is made before the insert; a duplicate username
    fails on the table constraint and surfaces as a StorageError.

    Raises:
        HashError: hashing failed
        StorageError: the insert failed
    """
    method = current_app.config.get('PASSWORD_HASH_METHOD', DEFAULT_METHOD)
    password_hash = hash_password(password, method=method)

    admin = Admin(username=username, password_hash=password_hash)
    try:
        db.session.add(admin)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise StorageError(f'could not register admin: {e}') from e

    logger.info('Registered admin %s', username)
    return admin


def authenticate_admin(username, password):
    """Return the Admin whose credentials match.

    An unknown username, a wrong password and a hash that cannot be
    verified all raise the same AuthError.
    """
    try:
        admin = Admin.query.filter_by(username=username).order_by(Admin.id).first()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise StorageError(f'could not look up admin: {e}') from e

    if admin is None:
        raise AuthError(INVALID_CREDENTIALS)

    try:
        matched = verify_password(password, admin.password_hash)
    except HashError:
        logger.warning('Stored hash for admin %s could not be verified', username)
        matched = False

    if not matched:
        raise AuthError(INVALID_CREDENTIALS)

    return admin


def load_admin(admin_id):
    """Turn the session's admin id back into an Admin, or None if it is gone.

    Raises:
        StorageError: the lookup failed
    """
    try:
        return db.session.get(Admin, int(admin_id))
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error('Could not load admin %s from session: %s', admin_id, e)
        raise StorageError(f'could not load admin {admin_id}: {e}') from e
