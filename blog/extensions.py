"""
Flask Extensions

Flask-Login is only used for `current_user` and `login_required`; the
identity itself comes from the session token cookie (see blog.services.sessions).
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager, fed by a request loader rather than login_user()
login_manager = LoginManager()
