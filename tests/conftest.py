import pytest
from flask import g
from flask.testing import FlaskClient

from blog import create_app
from blog.config import TestConfig
from blog.extensions import db
from blog.services import get_services


@pytest.fixture()
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


class _FreshIdentityClient(FlaskClient):
    """Requests reuse the test's app context, so drop Flask-Login's cached user first."""

    def open(self, *args, **kwargs):
        g.pop('_login_user', None)
        return super().open(*args, **kwargs)


@pytest.fixture()
def client(app):
    app.test_client_class = _FreshIdentityClient
    return app.test_client()


@pytest.fixture()
def services(app):
    return get_services()


@pytest.fixture()
def make_user(services):
    def _make(email, password='pw', is_admin=False):
        return services.auth.register(email, password, is_admin=is_admin)
    return _make


@pytest.fixture()
def login(client):
    def _login(email, password='pw'):
        return client.post('/login', data={'email': email, 'password': password})
    return _login


@pytest.fixture()
def logout(client):
    def _logout():
        return client.get('/logout')
    return _logout
