"""
Admin Model
"""

from flask_login import UserMixin

from member_directory.extensions import db


class Admin(UserMixin, db.Model):
    """Administrator account; only the salted hash of the password is stored"""
    __tablename__ = 'admins'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.Text, unique=True, nullable=False, index=True)
    password_hash = db.Column('password', db.Text, nullable=False)

    def __repr__(self):
        return f'<Admin {self.username}>'
