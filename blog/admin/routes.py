"""
Admin Routes
"""

from flask import render_template
from flask_login import current_user

from blog.admin import admin_bp
from blog.admin.decorators import admin_required
from blog.services import get_services


@admin_bp.route('/admin')
@admin_required
def admin_dashboard():
    """Admin page with a small system overview."""
    services = get_services()
    return render_template('admin.html',
                           total_users=services.users.count(),
                           total_posts=services.posts.count(),
                           active_sessions=services.sessions.count_active(),
                           admin_email=current_user.email)
