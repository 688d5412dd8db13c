"""
User Store
"""

import logging

from sqlalchemy.exc import IntegrityError

from blog.errors import DuplicateUserError
from blog.models import User
from blog.services.base import store_errors

logger = logging.getLogger(__name__)


class UserStore:
    """Create and look up users."""
    
    def __init__(self, session):
        self._session = session
    
    def find_by_email(self, email):
        with store_errors(self._session, 'look up user'):
            return User.query.filter_by(email=email).first()
    
    def create(self, email, password_hash, is_admin=False):
        user = User(email=email, password_hash=password_hash, is_admin=bool(is_admin))
        with store_errors(self._session, 'create user'):
            try:
                self._session.add(user)
                self._session.commit()
            except IntegrityError as exc:
                # Lost a race with a concurrent registration for the same email
                self._session.rollback()
                raise DuplicateUserError(f'{email} is already registered.') from exc
        logger.info('Created user %s (admin=%s)', user.id, user.is_admin)
        return user
    
    def set_admin(self, user, is_admin=True):
        with store_errors(self._session, 'update user'):
            user.is_admin = is_admin
            self._session.add(user)
            self._session.commit()
        return user

    def set_password_hash(self, user, password_hash):
        with store_errors(self._session, 'update user'):
            user.password_hash = password_hash
            self._session.add(user)
            self._session.commit()
        return user

    def count(self):
        with store_errors(self._session, 'count users'):
            return User.query.count()
