"""
Member Catalog

Create, list, group and delete members. Each call is a single round-trip
to the members table; nothing is cached.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from member_directory.errors import StorageError
from member_directory.extensions import db
from member_directory.models import Member, UNCATEGORIZED

logger = logging.getLogger(__name__)


def list_members():
    """Return every member in insertion order."""
    try:
        return Member.query.order_by(Member.id).all()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise StorageError(f'could not list members: {e}') from e


def list_members_grouped_by_role():
    """Group members by role for the public page.

    Returns:
        dict mapping role name to a list of members. Members with an empty
        or missing role go under UNCATEGORIZED. Roles keep the order in
        which they are first seen.
    """
    grouped = {}
    for member in list_members():
        grouped.setdefault(member.role or UNCATEGORIZED, []).append(member)
    return grouped


def create_member(name, role, contact, photo=None):
    """Insert a member. Fields are stored as given."""
    member = Member(name=name, role=role, contact=contact, photo=photo)
    try:
        db.session.add(member)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise StorageError(f'could not create member: {e}') from e

    logger.info('Created member %s (%s)', member.id, member.name)
    return member


def delete_member(member_id):
    """Delete a member by id. Deleting an id that does not exist is not an error."""
    try:
        deleted = Member.query.filter_by(id=member_id).delete()
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise StorageError(f'could not delete member {member_id}: {e}') from e

    logger.info('Member with ID %s deleted (%d row(s))', member_id, deleted)
