"""
Snippet Services

Insert and lookup operations for snippets. Expired snippets are invisible to
every read.
"""

import logging
from datetime import timedelta

from app.extensions import db
from app.models import Snippet
from app.models.clock import utcnow
from app.services.errors import NoRecordError

logger = logging.getLogger(__name__)


def insert_snippet(title, content, expires_days):
    """Store a new snippet and return its id.

    Args:
        title: Snippet title (at most 100 characters)
        content: Snippet body
        expires_days: Days until the snippet expires

    Returns:
        The id of the new snippet
    """
    created = utcnow()
    snippet = Snippet(
        title=title,
        content=content,
        created=created,
        expires=created + timedelta(days=expires_days),
    )
    db.session.add(snippet)
    db.session.commit()
    logger.debug('Inserted snippet %s expiring %s', snippet.id, snippet.expires)
    return snippet.id


def get_snippet(snippet_id):
    """Return the unexpired snippet with the given id, or raise NoRecordError."""
    snippet = Snippet.query.filter(
        Snippet.id == snippet_id,
        Snippet.expires > utcnow(),
    ).first()
    if snippet is None:
        raise NoRecordError(f'snippet {snippet_id} not found')
    return snippet


def latest_snippets(limit=10):
    """Most recently created unexpired snippets, newest first."""
    return Snippet.query.filter(Snippet.expires > utcnow())\
        .order_by(Snippet.id.desc())\
        .limit(limit)\
        .all()
