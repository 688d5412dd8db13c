"""
Posts Blueprint

Home page, static pages and the post compose/edit/delete flow.
"""

from flask import Blueprint

posts_bp = Blueprint('posts', __name__)

from blog.posts import routes  # noqa: E402, F401
