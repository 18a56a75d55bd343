"""
Models Package

Exports all models for easy importing.
"""

from blogsite.models.user import User
from blogsite.models.category import Category
from blogsite.models.blog import Blog

__all__ = ['User', 'Category', 'Blog']
