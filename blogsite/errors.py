"""
Error Types and Handlers

Service and storage failures are raised as ``BlogError`` subclasses and
converted to plain error pages at the request boundary. Pages never include
internal detail; the detail goes to the log.
"""

import logging

from flask import render_template
from flask_login import current_user
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


class BlogError(Exception):
    """Base class for failures raised by the blog services."""
    status_code = 500
    message = 'Something appears to have broken!'

    def __init__(self, message=None, **context):
        super().__init__(message or self.message)
        self.context = context


class ValidationError(BlogError):
    status_code = 400
    message = 'Please fill in all required fields.'


class DuplicateUser(BlogError):
    status_code = 409
    message = 'User ID already taken. Please choose a different one.'


class UnknownUser(BlogError):
    status_code = 401
    message = 'User ID not found.'


class InvalidCredentials(BlogError):
    status_code = 401
    message = 'Incorrect password.'


class NotFound(BlogError):
    status_code = 404
    message = 'Post not found.'


class Forbidden(BlogError):
    status_code = 403
    message = 'You are not authorized to change this post.'


class StorageFailure(BlogError):
    status_code = 500
    message = 'Storage failure.'


def _render_error(status_code):
    user = current_user if current_user.is_authenticated else None
    return render_template(f'errors/{status_code}.html', user=user), status_code


def register_error_handlers(app):
    """Attach the error pages to the application."""

    @app.errorhandler(NotFound)
    def post_not_found(error):
        logger.info('Not found: %s %s', error, error.context)
        return _render_error(404)

    @app.errorhandler(Forbidden)
    def post_forbidden(error):
        logger.warning('Forbidden: %s %s', error, error.context)
        return _render_error(403)

    @app.errorhandler(404)
    def page_not_found(error):
        return _render_error(404)

    @app.errorhandler(403)
    def forbidden(error):
        return _render_error(403)

    @app.errorhandler(Exception)
    def server_error(error):
        # Werkzeug errors (405 and friends) keep their own response
        if isinstance(error, HTTPException):
            return error
        logger.exception('Unhandled error: %s', error)
        try:
            return _render_error(500)
        except Exception:
            logger.exception('Could not render the error page')
            return 'Something appears to have broken! OOPS!', 500
