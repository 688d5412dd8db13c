"""
Admin Blueprint

Only users with the admin flag get past `admin_required`.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from blog.admin import routes  # noqa: E402, F401
