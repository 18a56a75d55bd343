"""
Blog Blueprint

Home listing and post create/edit/delete routes.
"""

from flask import Blueprint

blog_bp = Blueprint('blog', __name__)

from blogsite.blog import routes  # noqa: E402, F401
