"""
Services Package

Builds the store and auth services once per app and exposes them to
request handlers through `get_services()`.
"""

from flask import current_app

from blog.services.auth import AuthService
from blog.services.passwords import CredentialHasher
from blog.services.posts import PostStore
from blog.services.sessions import SessionStore
from blog.services.users import UserStore

EXTENSION_KEY = 'blog'


class BlogServices:
    """Container for the services a request handler may need."""
    
    def __init__(self, users, posts, sessions, auth):
        self.users = users
        self.posts = posts
        self.sessions = sessions
        self.auth = auth


def build_services(app, session):
    """Wire the stores against `session` and attach them to `app`."""
    users = UserStore(session)
    posts = PostStore(session)
    sessions = SessionStore(session, ttl=app.config['SESSION_TTL'])
    auth = AuthService(users, sessions, CredentialHasher.from_config(app.config))
    services = BlogServices(users, posts, sessions, auth)
    app.extensions[EXTENSION_KEY] = services
    return services


def get_services():
    return current_app.extensions[EXTENSION_KEY]


__all__ = [
    'AuthService',
    'BlogServices',
    'CredentialHasher',
    'PostStore',
    'SessionStore',
    'UserStore',
    'build_services',
    'get_services',
]
