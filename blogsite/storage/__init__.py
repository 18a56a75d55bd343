"""
Storage Package

Posts, categories and users live behind a store object so the services
never depend on a concrete representation. The active store is kept on
``app.extensions`` and looked up per request with ``get_store()``.
"""

from flask import current_app

from blogsite.storage.sql import SqlStore
from blogsite.storage.memory import MemoryStore

BACKENDS = {
    'sql': SqlStore,
    'memory': MemoryStore,
}


def init_store(app, store=None):
    """Attach a store to the app, building one from config if none is given."""
    if store is None:
        backend = app.config.get('STORAGE_BACKEND', 'sql')
        try:
            store = BACKENDS[backend]()
        except KeyError:
            raise ValueError(f'Unknown storage backend: {backend!r}') from None
    app.extensions['blog_store'] = store
    return store


def get_store():
    """Return the store attached to the current application."""
    return current_app.extensions['blog_store']


__all__ = ['SqlStore', 'MemoryStore', 'init_store', 'get_store']
