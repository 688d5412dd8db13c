"""
Auth Blueprint

Registration, login and logout backed by server-side sessions.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from blog.auth import routes  # noqa: E402, F401
