"""
ALTech Blog - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, flash, redirect, render_template, request, url_for
from blog.extensions import db, login_manager
from blog.config import Config
from blog.errors import AuthorizationError, StoreError

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure the Flask application.
    
    Args:
        config_class: Configuration class to use (default: Config)
    
    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    
    if not app.testing:
        logging.basicConfig(
            level=app.config['LOG_LEVEL'],
            format='%(asctime)s %(levelname)s %(name)s: %(message)s',
        )
    
    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'
    login_manager.login_message_category = 'info'
    
    from blog.services import build_services, get_services
    build_services(app, db.session)
    
    # Identity comes only from the session token cookie
    @login_manager.request_loader
    def load_user_from_request(req):
        token = req.cookies.get(app.config['SESSION_COOKIE_TOKEN_NAME'])
        return get_services().auth.resolve_session(token)
    
    # Register blueprints
    from blog.auth import auth_bp
    from blog.admin import admin_bp
    from blog.posts import posts_bp
    
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(posts_bp)
    
    from blog.cli import register_commands
    register_commands(app)
    
    @app.errorhandler(AuthorizationError)
    def handle_authorization_error(error):
        logger.warning('Denied %s %s: %s', request.method, request.path, error)
        flash(str(error), 'warning')
        return redirect(url_for('auth.login', next=request.path))

    @app.errorhandler(StoreError)
    def handle_store_error(error):
        logger.warning('Served error page for %s %s: %s', request.method, request.path, error)
        return render_template('error.html'), 500
    
    # Create database tables
    with app.app_context():
        if app.config['SQLALCHEMY_DATABASE_URI'].startswith('sqlite:///') and not app.testing:
            os.makedirs(os.path.join(Config.basedir, 'instance'), exist_ok=True)
        db.create_all()
    
    return app
