import pytest

from blogsite import create_app
from blogsite.config import TestConfig, MemoryTestConfig


@pytest.fixture(params=[TestConfig, MemoryTestConfig], ids=['sql', 'memory'])
def app(request):
    """An application for each storage backend."""
    return create_app(request.param)


@pytest.fixture()
def sql_app():
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    return app.test_client()


class AuthActions:
    """Sign-up/sign-in shortcuts for a test client."""

    def __init__(self, client):
        self._client = client

    def signup(self, user_id='alice', name='alice', password='pw1'):
        return self._client.post('/signup', data={'user_id': user_id, 'name': name, 'password': password})

    def signin(self, user_id='alice', password='pw1'):
        return self._client.post('/signin', data={'user_id': user_id, 'password': password})

    def signout(self):
        return self._client.get('/signout')

    def as_user(self, user_id, password='pw1', name=None):
        """Make sure the account exists, then sign in as it."""
        self.signout()
        self.signup(user_id, name or user_id, password)
        return self.signin(user_id, password)


@pytest.fixture()
def auth(client):
    return AuthActions(client)


def create_post(client, title='Hello', content='World', category='Technology', new_category=''):
    return client.post('/create-post', data={
        'title': title,
        'content': content,
        'category': category,
        'newCategory': new_category,
    })
