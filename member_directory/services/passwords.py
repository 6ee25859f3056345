"""
Password hashing built on werkzeug.security.
"""

from werkzeug.security import generate_password_hash, check_password_hash

from member_directory.errors import HashError

DEFAULT_METHOD = 'pbkdf2:sha256'
SALT_LENGTH = 16


def hash_password(password, method=DEFAULT_METHOD):
    """Return a salted hash of `password`.

    Raises:
        HashError: the method is unknown or the password is not a string
    """
    try:
        return generate_password_hash(password, method=method, salt_length=SALT_LENGTH)
    except (AttributeError, TypeError, ValueError) as e:
        raise HashError(f'could not hash password: {e}') from e


def verify_password(password, password_hash):
    """Constant-time check of `password` against a stored hash."""
    try:
        return check_password_hash(password_hash, password)
    except (AttributeError, TypeError, ValueError) as e:
        raise HashError(f'could not verify password: {e}') from e
