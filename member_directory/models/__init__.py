"""
Models Package

Exports all models for easy importing.
"""

from member_directory.models.member import Member, UNCATEGORIZED
from member_directory.models.admin import Admin

__all__ = ['Member', 'Admin', 'UNCATEGORIZED']
