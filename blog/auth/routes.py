"""
Auth Routes

Login hands the browser an opaque session token; Flask-Login's request
loader turns it back into `current_user` on every request.
"""

import logging
from urllib.parse import urlsplit

from flask import current_app, flash, redirect, render_template, request, url_for
from flask_login import current_user

from blog.auth import auth_bp
from blog.errors import AuthenticationError, DuplicateUserError, StoreError, ValidationError
from blog.services import get_services

logger = logging.getLogger(__name__)


def _safe_next(target):
    """Only follow local redirect targets."""
    if not target:
        return None
    parts = urlsplit(target)
    if parts.scheme or parts.netloc or not target.startswith('/'):
        return None
    return target


def _token_cookie_name():
    return current_app.config['SESSION_COOKIE_TOKEN_NAME']


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    """User registration route"""
    if current_user.is_authenticated:
        return redirect(url_for('posts.home'))
    
    if request.method == 'POST':
        email = request.form.get('email', '')
        password = request.form.get('password', '')
        wants_admin = request.form.get('is_admin') == 'true'
        is_admin = wants_admin and current_app.config['ALLOW_ADMIN_REGISTRATION']
        
        try:
            get_services().auth.register(email, password, is_admin=is_admin)
        except DuplicateUserError:
            flash('Email already registered. Please login or use another email.', 'danger')
            return redirect(url_for('auth.register'))
        except ValidationError as e:
            flash(str(e), 'danger')
            return redirect(url_for('auth.register'))
        except StoreError:
            flash('An error occurred during registration. Please try again.', 'danger')
            return redirect(url_for('auth.register'))
        
        flash('Registration successful! Please login.', 'success')
        return redirect(url_for('auth.login'))
    
    return render_template('auth/register.html')


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route"""
    if current_user.is_authenticated:
        return redirect(url_for('posts.home'))
    
    if request.method == 'POST':
        email = request.form.get('email', '')
        password = request.form.get('password', '')
        
        try:
            token, user = get_services().auth.login(email, password)
        except AuthenticationError as e:
            flash(str(e), 'danger')
            return redirect(url_for('auth.login'))
        except StoreError:
            flash('Login is unavailable right now. Please try again.', 'danger')
            return redirect(url_for('auth.login'))
        
        flash(f'Welcome back, {user.email}!', 'success')
        next_page = _safe_next(request.args.get('next'))
        response = redirect(next_page or url_for('posts.home'))
        ttl = get_services().sessions.ttl
        response.set_cookie(
            _token_cookie_name(),
            token,
            max_age=int(ttl.total_seconds()),
            httponly=True,
            samesite='Lax',
            secure=current_app.config['SESSION_COOKIE_SECURE'],
        )
        return response
    
    return render_template('auth/login.html')


@auth_bp.route('/logout')
def logout():
    """User logout route"""
    token = request.cookies.get(_token_cookie_name())
    try:
        get_services().auth.logout(token)
    except StoreError:
        # The cookie still goes; the row expires on its own
        logger.warning('Could not revoke session on logout')
    else:
        logger.info('Session revoked on logout')
    
    flash('You have been logged out successfully.', 'info')
    response = redirect(url_for('posts.home'))
    response.delete_cookie(_token_cookie_name())
    return response
