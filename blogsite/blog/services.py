"""
Post Services

Category resolution and post create/edit/delete. Every mutation of an
existing post checks that the requester is the post's creator.
"""

import logging
from datetime import datetime

from flask import current_app

from blogsite.errors import ValidationError, NotFound, Forbidden
from blogsite.models import Blog
from blogsite.storage import get_store

logger = logging.getLogger(__name__)

NEW_CATEGORY = 'new'


def truncate(text, n):
    """Shorten text to at most n characters, ending with '...' when cut."""
    if text is None:
        return ''
    return text[:n - 1] + '...' if len(text) > n else text


def category_from_form(form):
    """Pick the category name from a post form.

    The select box sends the literal value ``new`` when the author typed a
    category into the ``newCategory`` field instead.
    """
    category = (form.get('category') or '').strip()
    if category == NEW_CATEGORY:
        return (form.get('newCategory') or '').strip()
    return category


def list_posts():
    """All posts, newest first."""
    return get_store().list_posts()


def list_categories():
    """Category names in alphabetical order."""
    return [c.category_name for c in get_store().list_categories()]


def resolve_or_create_category(name, store=None):
    """Return the category for ``name``, creating it on first use.

    Lookup is exact and case-sensitive. Calling this twice with the same
    name returns the same category both times.
    """
    if not name:
        raise ValidationError('Please choose a category.')
    store = store or get_store()
    category = store.find_category(name)
    if category is None:
        category = store.add_category(name)
        logger.info('New category created: %s (ID: %s)', name, category.category_id)
    return category


def _require_fields(title, content):
    if not title or not title.strip():
        raise ValidationError('Please enter a title.')
    if not content or not content.strip():
        raise ValidationError('Please enter some content.')


def _log_post(action, blog):
    config = current_app.config
    logger.info('%s ID: %s Title: %s Author: %s Category: %s Content preview: %s',
                action,
                blog.blog_id,
                truncate(blog.title, config.get('LOG_TITLE_PREVIEW', 100)),
                blog.creator_name,
                blog.category.category_name,
                truncate(blog.content, config.get('LOG_CONTENT_PREVIEW', 250)))


def create_post(title, content, category_name, creator):
    """Create a post owned by ``creator`` and return it."""
    _require_fields(title, content)
    store = get_store()
    with store.unit_of_work():
        category = resolve_or_create_category(category_name, store)
        blog = Blog(creator_user_id=creator.user_id,
                    creator_name=creator.name,
                    title=title,
                    content=content,
                    category_id=category.category_id,
                    date_created=datetime.utcnow())
        blog.category = category
        store.insert_post(blog)
    _log_post('New post created!', blog)
    return blog


def get_owned_post(post_id, requester, action='edit'):
    """Fetch a post, failing unless it exists and belongs to ``requester``."""
    blog = get_store().get_post(post_id)
    if blog is None:
        raise NotFound(post_id=post_id, user_id=requester.user_id, action=action)
    if not blog.is_owned_by(requester.user_id):
        raise Forbidden(post_id=post_id, user_id=requester.user_id, action=action)
    return blog


def edit_post(post_id, title, content, category_name, requester):
    """Overwrite a post's title, content and category."""
    store = get_store()
    with store.unit_of_work():
        blog = get_owned_post(post_id, requester, action='edit')
        _require_fields(title, content)
        category = resolve_or_create_category(category_name, store)
        blog.title = title
        blog.content = content
        blog.category_id = category.category_id
        blog.category = category
        blog.date_modified = datetime.utcnow()
        store.update_post(blog)
    _log_post('Post edited!', blog)
    return blog


def delete_post(post_id, requester):
    """Permanently remove a post. Unused categories are left in place."""
    store = get_store()
    with store.unit_of_work():
        blog = get_owned_post(post_id, requester, action='delete')
        store.delete_post(blog)
    logger.info('Post deleted! ID: %s by %s', post_id, requester.user_id)
