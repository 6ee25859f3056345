"""
Error taxonomy for the member catalog and admin authentication.

Routes catch these and answer with a generic status code; the message
never reaches the client.
"""


class DirectoryError(Exception):
    """Base class for member directory failures."""


class StorageError(DirectoryError):
    """A database call failed (connectivity, query or constraint)."""


class AuthError(DirectoryError):
    """Unknown username or wrong password."""


class HashError(DirectoryError):
    """Password hashing or verification failed internally."""
