"""
Auth Blueprint

Sign-up, sign-in and sign-out backed by Flask-Login sessions.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from blogsite.auth import routes  # noqa: E402, F401
