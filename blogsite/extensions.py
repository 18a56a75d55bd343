"""
Flask Extensions

The database handle backs the SQL storage backend; the login manager
resolves the signed session cookie to the current user for every backend.
Its ``user_loader`` is registered in ``create_app`` once the store exists.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

db = SQLAlchemy()

# Anonymous visitors hitting a guarded route are sent to the sign-in form
login_manager = LoginManager()
login_manager.login_view = 'auth.signin'
login_manager.login_message = 'Please sign in to continue.'
login_manager.login_message_category = 'info'
