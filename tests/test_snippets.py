from datetime import timedelta

import pytest

from app.extensions import db
from app.models import Snippet
from app.models.clock import utcnow
from app.services import insert_snippet


@pytest.fixture()
def snippet_id(app):
    with app.app_context():
        return insert_snippet('An old silent pond', 'An old silent pond...\nA frog jumps into the pond,', 7)


def test_home_without_snippets(client):
    r = client.get('/')
    assert r.status_code == 200
    assert "There's nothing to see here... yet!" in r.get_data(as_text=True)


def test_home_lists_unexpired_snippets(app, client, snippet_id):
    with app.app_context():
        created = utcnow() - timedelta(days=3)
        db.session.add(Snippet(title='Expired haiku', content='...', created=created,
                               expires=created + timedelta(days=1)))
        db.session.commit()

    r = client.get('/')
    body = r.get_data(as_text=True)
    assert r.status_code == 200
    assert 'An old silent pond' in body
    assert f'/snippet/view/{snippet_id}' in body
    assert 'Expired haiku' not in body


def test_view_snippet(client, snippet_id):
    r = client.get(f'/snippet/view/{snippet_id}')
    body = r.get_data(as_text=True)
    assert r.status_code == 200
    assert 'An old silent pond' in body
    assert 'A frog jumps into the pond' in body
    assert f'#{snippet_id}' in body


@pytest.mark.parametrize('path', [
    '/snippet/view/0',
    '/snippet/view/-1',
    '/snippet/view/1.23',
    '/snippet/view/foo',
    '/snippet/view/',
    '/snippet/view/2',
    '/snippet/view/99999999999999999999999',
])
def test_view_invalid_or_missing_ids(client, snippet_id, path):
    r = client.get(path)
    assert r.status_code == 404
    assert r.get_data(as_text=True) == 'Not Found'


def test_view_expired_snippet(app, client):
    with app.app_context():
        created = utcnow() - timedelta(days=8)
        snippet = Snippet(title='Stale', content='...', created=created, expires=created + timedelta(days=7))
        db.session.add(snippet)
        db.session.commit()
        stale_id = snippet.id

    assert client.get(f'/snippet/view/{stale_id}').status_code == 404


@pytest.mark.parametrize('method', ['get', 'post'])
def test_create_requires_authentication(client, method):
    r = getattr(client, method)('/snippet/create', data={'title': 'x', 'content': 'y', 'expires': '1'})
    assert r.status_code == 303
    assert r.headers['Location'].endswith('/user/login')

    with client.session_transaction() as sess:
        assert sess['next'] == '/snippet/create'
        assert '_flashes' not in sess


def test_create_form_for_authenticated_user(auth_client):
    r = auth_client.get('/snippet/create')
    body = r.get_data(as_text=True)
    assert r.status_code == 200
    assert r.headers['Cache-Control'] == 'no-store'
    assert '<form action="/snippet/create" method="POST">' in body
    assert 'value="365" checked' in body


def test_create_snippet(app, auth_client):
    r = auth_client.post('/snippet/create', data={
        'title': 'O snail',
        'content': 'O snail\nClimb Mount Fuji,',
        'expires': '1',
    })
    assert r.status_code == 303
    location = r.headers['Location']
    assert '/snippet/view/' in location

    with app.app_context():
        snippet = Snippet.query.filter_by(title='O snail').one()
        assert snippet.expires - snippet.created == timedelta(days=1)
        new_id = snippet.id
    assert location.endswith(f'/snippet/view/{new_id}')

    r = auth_client.get(location)
    body = r.get_data(as_text=True)
    assert 'Snippet successfully created!' in body
    assert 'Climb Mount Fuji' in body


def test_create_snippet_invalid(app, auth_client):
    r = auth_client.post('/snippet/create', data={'title': '', 'content': 'kept', 'expires': '9'})
    body = r.get_data(as_text=True)
    assert r.status_code == 422
    assert 'This field cannot be blank' in body
    assert 'This field must equal 1, 7 or 365' in body
    assert 'kept</textarea>' in body

    with app.app_context():
        assert Snippet.query.count() == 0


def test_create_snippet_without_expiry(app, auth_client):
    r = auth_client.post('/snippet/create', data={'title': 'No expiry', 'content': 'body'})
    assert r.status_code == 422
    assert 'This field must equal 1, 7 or 365' in r.get_data(as_text=True)

    with app.app_context():
        assert Snippet.query.count() == 0


def test_create_snippet_non_numeric_expiry(auth_client):
    r = auth_client.post('/snippet/create', data={'title': 'Bad expiry', 'content': 'body', 'expires': 'abc'})
    body = r.get_data(as_text=True)
    assert r.status_code == 422
    assert 'This field must equal 1, 7 or 365' in body
    assert 'could not coerce' not in body
