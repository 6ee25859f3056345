"""
Services Package

Exports all services for easy importing.
"""

from member_directory.services.passwords import hash_password, verify_password
from member_directory.services.admin_auth import (
    register_admin,
    authenticate_admin,
    load_admin,
    INVALID_CREDENTIALS,
)
from member_directory.services.catalog import (
    list_members,
    list_members_grouped_by_role,
    create_member,
    delete_member,
)
from member_directory.services.uploads import save_photo

__all__ = [
    'hash_password',
    'verify_password',
    'register_admin',
    'authenticate_admin',
    'load_admin',
    'INVALID_CREDENTIALS',
    'list_members',
    'list_members_grouped_by_role',
    'create_member',
    'delete_member',
    'save_photo',
]
