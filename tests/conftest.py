import pytest

from app import create_app
from app.config import TestConfig
from app.services import insert_user

ALICE = {'name': 'Alice Jones', 'email': 'alice@example.com', 'password': 'pa55word'}


@pytest.fixture()
def app():
    return create_app(TestConfig)


@pytest.fixture()
def app_context(app):
    with app.app_context():
        yield


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def alice(app):
    with app.app_context():
        return insert_user(ALICE['name'], ALICE['email'], ALICE['password'])


@pytest.fixture()
def auth_client(client, alice):
    r = client.post('/user/login', data={'email': ALICE['email'], 'password': ALICE['password']})
    assert r.status_code == 303
    return client
