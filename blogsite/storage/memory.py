"""
In-Memory Store

Process-local lists of users, categories and posts. Nothing survives a
restart and there is no cross-process sharing; units of work are
serialized with a lock and undo list inserts/removals when they fail.
"""

import itertools
import logging
import threading
from contextlib import contextmanager

from blogsite.models import Category

logger = logging.getLogger(__name__)


class MemoryStore:
    """Store keeping every record in process memory."""

    name = 'memory'

    def __init__(self):
        self._lock = threading.RLock()
        self._depth = 0
        self.users = {}
        self.categories = []
        self.posts = []
        self._category_ids = itertools.count(1)
        self._post_ids = itertools.count(1)

    def init_app(self, app):
        logger.info('Using in-memory storage; data is lost on restart')

    @contextmanager
    def unit_of_work(self):
        with self._lock:
            snapshot = (dict(self.users), list(self.categories), list(self.posts))
            self._depth += 1
            try:
                yield self
            except Exception:
                if self._depth == 1:
                    self.users, self.categories, self.posts = snapshot
                raise
            finally:
                self._depth -= 1

    # Users

    def get_user(self, user_id):
        return self.users.get(user_id)

    def add_user(self, user):
        self.users[user.user_id] = user
        return user

    # Categories

    def find_category(self, name):
        for category in self.categories:
            if category.category_name == name:
                return category
        return None

    def add_category(self, name):
        category = Category(category_id=next(self._category_ids), category_name=name)
        self.categories.append(category)
        return category

    def list_categories(self):
        return sorted(self.categories, key=lambda c: c.category_name)

    # Posts

    def list_posts(self):
        return sorted(self.posts, key=lambda p: (p.date_created, p.blog_id), reverse=True)

    def get_post(self, post_id):
        for post in self.posts:
            if post.blog_id == post_id:
                return post
        return None

    def insert_post(self, blog):
        blog.blog_id = next(self._post_ids)
        self.posts.append(blog)
        return blog

    def update_post(self, blog):
        return blog

    def delete_post(self, blog):
        blog.category = None
        self.posts.remove(blog)
