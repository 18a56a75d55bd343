"""
Auth Services

Account creation and credential checks. Passwords are stored as salted
pbkdf2 hashes; sessions are handled by Flask-Login.
"""

import logging
from datetime import datetime

from flask import session
from flask_login import login_user, logout_user
from werkzeug.security import generate_password_hash, check_password_hash

from blogsite.errors import ValidationError, DuplicateUser, UnknownUser, InvalidCredentials
from blogsite.models import User
from blogsite.storage import get_store

logger = logging.getLogger(__name__)


def sign_up(user_id, name, password):
    """Register a new user. The caller still has to sign in afterwards."""
    user_id = (user_id or '').strip()
    name = (name or '').strip()
    if not user_id or not name or not password:
        raise ValidationError('User ID, name and password are all required.')
    
    store = get_store()
    with store.unit_of_work():
        if store.get_user(user_id) is not None:
            raise DuplicateUser(user_id=user_id)
        user = User(user_id=user_id,
                    name=name,
                    password_hash=generate_password_hash(password, method='pbkdf2:sha256'),
                    date_created=datetime.utcnow())
        store.add_user(user)
    logger.info('New user signed up: %s', user_id)
    return user


def authenticate(user_id, password):
    """Return the user matching the credentials or raise."""
    user_id = (user_id or '').strip()
    user = get_store().get_user(user_id)
    if user is None:
        raise UnknownUser(user_id=user_id)
    if not check_password_hash(user.password_hash, password or ''):
        raise InvalidCredentials(user_id=user_id)
    return user


def sign_in(user_id, password):
    """Check the credentials and bind the session to the user."""
    user = authenticate(user_id, password)
    login_user(user)
    logger.info('User signed in: %s', user.user_id)
    return user


def sign_out():
    """Forget the current session. Safe to call when nobody is signed in."""
    try:
        logout_user()
        session.clear()
    except Exception as e:
        logger.error('Error signing out: %s', e)
