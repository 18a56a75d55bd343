import pytest

from blogsite.auth.services import sign_up, authenticate, sign_in
from blogsite.errors import DuplicateUser, UnknownUser, InvalidCredentials, ValidationError
from blogsite.storage import get_store


def test_signup_then_signin_succeeds(client, auth):
    r = auth.signup('alice', 'Alice', 'pw1')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/signin')

    r = auth.signin('alice', 'pw1')
    assert r.status_code == 302
    with client.session_transaction() as sess:
        assert sess['_user_id'] == 'alice'


def test_signup_does_not_sign_in(client, auth):
    auth.signup()
    with client.session_transaction() as sess:
        assert '_user_id' not in sess


def test_duplicate_signup_reports_and_keeps_one_user(app, client, auth):
    auth.signup('alice', 'Alice', 'pw1')
    r = auth.signup('alice', 'Someone Else', 'other')
    assert r.status_code == 409
    assert 'User ID already taken' in r.get_data(as_text=True)

    with app.app_context():
        user = get_store().get_user('alice')
        assert user.name == 'Alice'
        # the original password still works
        assert authenticate('alice', 'pw1') is user


def test_wrong_password_never_establishes_session(client, auth):
    auth.signup()
    r = auth.signin('alice', 'wrong')
    assert r.status_code == 401
    assert 'Incorrect password' in r.get_data(as_text=True)
    with client.session_transaction() as sess:
        assert '_user_id' not in sess


def test_unknown_user(client, auth):
    r = auth.signin('nobody', 'pw1')
    assert r.status_code == 401
    assert 'User ID not found' in r.get_data(as_text=True)


def test_signout_is_idempotent(client, auth):
    auth.signup()
    auth.signin()
    r = auth.signout()
    assert r.status_code == 302
    with client.session_transaction() as sess:
        assert '_user_id' not in sess

    r = auth.signout()
    assert r.status_code == 302


def test_protected_route_redirects_to_signin(client):
    r = client.get('/create-post')
    assert r.status_code == 302
    assert '/signin' in r.headers['Location']


def test_read_only_routes_are_open(client):
    assert client.get('/').status_code == 200
    assert client.get('/signin').status_code == 200
    assert client.get('/signup').status_code == 200


def test_password_is_hashed(app):
    with app.app_context():
        user = sign_up('carol', 'Carol', 'secret')
        assert user.password_hash != 'secret'
        assert user.password_hash.startswith('pbkdf2:sha256')


def test_service_errors(app):
    with app.app_context():
        sign_up('dave', 'Dave', 'pw')
        with pytest.raises(DuplicateUser):
            sign_up('dave', 'Dave again', 'pw')
        with pytest.raises(UnknownUser):
            authenticate('erin', 'pw')
        with pytest.raises(InvalidCredentials):
            authenticate('dave', 'nope')
        with pytest.raises(ValidationError):
            sign_up('', 'No id', 'pw')


def test_sign_in_binds_session(app):
    with app.app_context():
        sign_up('frank', 'Frank', 'pw')
    with app.test_request_context('/signin', method='POST'):
        from flask_login import current_user
        user = sign_in('frank', 'pw')
        assert current_user.is_authenticated
        assert current_user.user_id == user.user_id == 'frank'


def test_signout_error_is_logged_not_raised(client, auth, monkeypatch, caplog):
    auth.signup()
    auth.signin()

    def broken_logout():
        raise RuntimeError('session store unavailable')

    monkeypatch.setattr('blogsite.auth.services.logout_user', broken_logout)
    with caplog.at_level('ERROR', logger='blogsite.auth.services'):
        r = auth.signout()
    assert r.status_code == 302
    assert 'Error signing out: session store unavailable' in caplog.text
