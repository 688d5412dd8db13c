"""
Admin Decorator
"""

from functools import wraps
from flask_login import current_user

from blog.auth.guards import require_admin
from blog.errors import AuthorizationError


def admin_required(f):
    """Decorator to ensure the request comes from an authenticated admin.
    
    Raises AuthorizationError for anonymous visitors and non-admin users;
    the app-level handler turns that into a redirect to the login page.
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not require_admin(current_user):
            raise AuthorizationError('Administrator access required.')
        return f(*args, **kwargs)
    return wrapper
