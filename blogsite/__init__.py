"""
Blog Site - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask

from blogsite.config import Config
from blogsite.extensions import db, login_manager


def create_app(config_class=Config, store=None):
    """Create and configure the Flask application.
    
    Args:
        config_class: Configuration class to use (default: Config)
        store: Storage object to use instead of the configured backend
    
    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    _configure_logging(app)
    
    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    
    # Storage backend
    from blogsite.storage import init_store
    store = init_store(app, store)
    if store.name == 'sql' and not app.config.get('TESTING'):
        os.makedirs(os.path.join(config_class.basedir, 'instance'), exist_ok=True)
    store.init_app(app)
    
    # Register blueprints
    from blogsite.auth import auth_bp
    from blogsite.blog import blog_bp
    
    app.register_blueprint(auth_bp)
    app.register_blueprint(blog_bp)
    
    from blogsite.errors import register_error_handlers
    register_error_handlers(app)
    
    # Site name for the layout
    @app.context_processor
    def inject_site_name():
        return dict(site_name=app.config.get('SITE_NAME', 'Blog'))
    
    # Session lookup for Flask-Login
    @login_manager.user_loader
    def load_user(user_id):
        from blogsite.storage import get_store
        return get_store().get_user(user_id)
    
    app.logger.info('Blog site ready (storage: %s)', store.name)
    return app


def _configure_logging(app):
    """Set the root log level from config and make sure something prints it."""
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    logging.basicConfig(level=level,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    logging.getLogger().setLevel(level)
