"""
Member Model
"""

from member_directory.extensions import db

# Grouping key for members without a role; never written to the table
UNCATEGORIZED = 'Uncategorized'


class Member(db.Model):
    """A directory entry shown on the public page"""
    __tablename__ = 'members'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.Text, nullable=False)
    role = db.Column(db.Text)
    contact = db.Column(db.Text)
    # Relative URL of the uploaded photo, e.g. /uploads/1700000000000-ada.png
    photo = db.Column(db.Text)

    @property
    def category(self):
        return self.role or UNCATEGORIZED

    def __repr__(self):
        return f'<Member {self.id} {self.name}>'
