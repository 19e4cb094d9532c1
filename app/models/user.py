"""
User Model
"""

from flask_login import UserMixin
from app.extensions import db
from app.models.clock import utcnow


class User(UserMixin, db.Model):
    """User model for authentication"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    hashed_password = db.Column(db.String(255), nullable=False)
    created = db.Column(db.DateTime, nullable=False, default=utcnow)

    def __repr__(self):
        return f'<User {self.email}>'
