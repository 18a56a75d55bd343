"""
Relational Store

Flask-SQLAlchemy backed storage. Writes are only committed when the
enclosing unit of work finishes, so a category created for a post is
rolled back together with the post if anything fails in between.
"""

import logging
from contextlib import contextmanager
from functools import wraps

from sqlalchemy.exc import SQLAlchemyError

from blogsite.errors import StorageFailure
from blogsite.extensions import db
from blogsite.models import User, Category, Blog

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value
MAX_ROW_ID = 2 ** 63 - 1


def _storage_call(f):
    """Convert database errors raised by a store method to StorageFailure."""
    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception('Storage error in %s: %s', f.__name__, e)
            raise StorageFailure(operation=f.__name__) from e
    return wrapper


class SqlStore:
    """Store backed by the ``users``, ``categories`` and ``blogs`` tables."""

    name = 'sql'

    def init_app(self, app):
        with app.app_context():
            db.create_all()

    @contextmanager
    def unit_of_work(self):
        try:
            yield self
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            logger.exception('Transaction rolled back: %s', e)
            raise StorageFailure(operation='commit') from e
        except Exception:
            db.session.rollback()
            raise

    # Users

    @_storage_call
    def get_user(self, user_id):
        return db.session.get(User, user_id)

    @_storage_call
    def add_user(self, user):
        db.session.add(user)
        db.session.flush()
        return user

    # Categories

    @_storage_call
    def find_category(self, name):
        return Category.query.filter_by(category_name=name).first()

    @_storage_call
    def add_category(self, name):
        category = Category(category_name=name)
        db.session.add(category)
        db.session.flush()
        return category

    @_storage_call
    def list_categories(self):
        return Category.query.order_by(Category.category_name).all()

    # Posts

    @_storage_call
    def list_posts(self):
        return Blog.query.order_by(Blog.date_created.desc(), Blog.blog_id.desc()).all()

    @_storage_call
    def get_post(self, post_id):
        if not 0 < post_id <= MAX_ROW_ID:
            return None
        return db.session.get(Blog, post_id)

    @_storage_call
    def insert_post(self, blog):
        db.session.add(blog)
        db.session.flush()
        return blog

    @_storage_call
    def update_post(self, blog):
        db.session.add(blog)
        db.session.flush()
        return blog

    @_storage_call
    def delete_post(self, blog):
        db.session.delete(blog)
        db.session.flush()
