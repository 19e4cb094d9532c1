"""
Snippet Model
"""

from app.extensions import db
from app.models.clock import utcnow


class Snippet(db.Model):
    """A short piece of text that disappears after its expiry date"""
    __tablename__ = 'snippets'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(100), nullable=False)
    content = db.Column(db.Text, nullable=False)
    created = db.Column(db.DateTime, nullable=False, default=utcnow)
    expires = db.Column(db.DateTime, nullable=False, index=True)

    def __repr__(self):
        return f'<Snippet {self.id} {self.title!r}>'
