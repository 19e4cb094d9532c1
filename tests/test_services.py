from datetime import timedelta

import pytest

from app.extensions import db
from app.models import Snippet, User
from app.models.clock import utcnow
from app.services import (
    DuplicateEmailError,
    InvalidCredentialsError,
    NoRecordError,
    authenticate,
    get_snippet,
    insert_snippet,
    insert_user,
    latest_snippets,
)


def _expired_snippet(title='Old news'):
    created = utcnow() - timedelta(days=2)
    snippet = Snippet(title=title, content='gone', created=created, expires=created + timedelta(days=1))
    db.session.add(snippet)
    db.session.commit()
    return snippet.id


def test_insert_and_get_snippet(app_context):
    snippet_id = insert_snippet('An old silent pond', 'A frog jumps into the pond', 7)

    snippet = get_snippet(snippet_id)
    assert snippet.title == 'An old silent pond'
    assert snippet.content == 'A frog jumps into the pond'
    assert snippet.expires - snippet.created == timedelta(days=7)


def test_get_missing_snippet_raises(app_context):
    with pytest.raises(NoRecordError):
        get_snippet(42)


def test_get_expired_snippet_raises(app_context):
    snippet_id = _expired_snippet()
    with pytest.raises(NoRecordError):
        get_snippet(snippet_id)


def test_latest_snippets_newest_first_and_limited(app_context):
    ids = [insert_snippet(f'Snippet {i}', 'body', 365) for i in range(12)]
    _expired_snippet()

    latest = latest_snippets(10)
    assert [s.id for s in latest] == list(reversed(ids))[:10]


def test_insert_user_hashes_password(app_context):
    user_id = insert_user('Bob', 'bob@example.com', 'pa55word')

    user = db.session.get(User, user_id)
    assert user.hashed_password != 'pa55word'
    assert user.hashed_password.startswith('pbkdf2:sha256')
    assert user.created is not None


def test_insert_user_duplicate_email(app_context):
    insert_user('Bob', 'bob@example.com', 'pa55word')
    with pytest.raises(DuplicateEmailError):
        insert_user('Robert', 'bob@example.com', 'different1')
    assert User.query.count() == 1


def test_authenticate(app_context):
    user_id = insert_user('Bob', 'bob@example.com', 'pa55word')

    assert authenticate('bob@example.com', 'pa55word') == user_id
    with pytest.raises(InvalidCredentialsError):
        authenticate('bob@example.com', 'wrong-password')
    with pytest.raises(InvalidCredentialsError):
        authenticate('nobody@example.com', 'pa55word')

