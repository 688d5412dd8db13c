"""
Authentication Service

Registration, login and logout on top of the user and session stores.
"""

import logging

from blog.errors import AuthenticationError, DuplicateUserError, ValidationError

logger = logging.getLogger(__name__)

LOGIN_FAILED = 'Invalid email or password.'


def normalize_email(email):
    return (email or '').strip().lower()


class AuthService:
    """Credential checks and session lifecycle."""
    
    def __init__(self, users, sessions, hasher):
        self.users = users
        self.sessions = sessions
        self.hasher = hasher
        # Verified against when the email is unknown, so both failure paths cost the same
        self._dummy_hash = hasher.hash('not-a-real-password')
    
    def register(self, email, password, is_admin=False):
        """Create a user with an Argon2id password hash.
        
        Raises:
            ValidationError: empty email or password
            DuplicateUserError: email already registered
            StoreError: database failure
        """
        email = normalize_email(email)
        if not email or not password:
            raise ValidationError('Email and password are required.')
        if self.users.find_by_email(email) is not None:
            raise DuplicateUserError(f'{email} is already registered.')
        
        user = self.users.create(email, self.hasher.hash(password), is_admin=is_admin)
        logger.info('Registered user %s', user.id)
        return user
    
    def authenticate(self, identifier, password):
        """Return the user for these credentials or raise AuthenticationError."""
        email = normalize_email(identifier)
        if not email or not password:
            raise AuthenticationError(LOGIN_FAILED)
        
        user = self.users.find_by_email(email)
        digest = user.password_hash if user is not None else self._dummy_hash
        if not self.hasher.verify(digest, password) or user is None:
            logger.warning('Failed login attempt')
            raise AuthenticationError(LOGIN_FAILED)

        # Hashes made under older cost parameters are upgraded on the next good login
        if self.hasher.needs_rehash(user.password_hash):
            self.users.set_password_hash(user, self.hasher.hash(password))
            logger.info('Rehashed password for user %s', user.id)
        return user
    
    def login(self, identifier, password):
        """Check credentials and open a new session.
        
        Returns:
            (token, user) tuple
        """
        user = self.authenticate(identifier, password)
        record = self.sessions.create(user.id)
        logger.info('User %s logged in', user.id)
        return record.token, user
    
    def logout(self, token):
        self.sessions.revoke(token)
    
    def resolve_session(self, token):
        return self.sessions.resolve(token)
    
    def ensure_admin(self, email, password):
        """Create an admin user, or promote the existing user with this email."""
        try:
            return self.register(email, password, is_admin=True)
        except DuplicateUserError:
            user = self.users.find_by_email(normalize_email(email))
            logger.info('Promoting existing user %s to admin', user.id)
            return self.users.set_admin(user, True)
