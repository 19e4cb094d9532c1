"""
Session Model

Server-side session rows looked up by the token carried in the session cookie.
"""

from app.extensions import db


class SessionRecord(db.Model):
    """Serialized session state with an absolute expiry"""
    __tablename__ = 'sessions'

    token = db.Column(db.String(43), primary_key=True)
    data = db.Column(db.Text, nullable=False)
    expiry = db.Column(db.DateTime, nullable=False, index=True)

    def __repr__(self):
        return f'<SessionRecord expires {self.expiry}>'
