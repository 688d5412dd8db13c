"""
Session Store

Login sessions live server-side; the browser only holds an opaque token.
Each session expires a fixed TTL after creation and is never extended.
"""

import logging
import secrets
from datetime import timedelta

from blog.errors import StoreError
from blog.models import AuthSession
from blog.services.base import store_errors, utcnow

logger = logging.getLogger(__name__)

DEFAULT_SESSION_TTL = timedelta(hours=1)


class SessionStore:
    """Create, resolve and revoke login sessions."""
    
    def __init__(self, session, ttl=DEFAULT_SESSION_TTL, clock=utcnow):
        self._session = session
        self.ttl = ttl
        self._clock = clock
    
    def create(self, user_id):
        now = self._clock()
        record = AuthSession(
            token=secrets.token_urlsafe(32),
            user_id=user_id,
            created_at=now,
            expires_at=now + self.ttl,
        )
        with store_errors(self._session, 'create session'):
            self._session.add(record)
            self._session.commit()
        return record
    
    def resolve(self, token):
        """Return the User behind `token`, or None.
        
        None covers a missing, unknown or expired token, a session whose
        user is gone, and a failing store. This never raises.
        """
        if not token:
            return None
        try:
            with store_errors(self._session, 'resolve session'):
                record = self._session.get(AuthSession, token)
                if record is None:
                    return None
                if record.is_expired(self._clock()):
                    self._session.delete(record)
                    self._session.commit()
                    return None
                return record.user
        except StoreError:
            logger.warning('Treating request as anonymous after session store failure')
            return None
    
    def revoke(self, token):
        """Delete the session. Unknown tokens are ignored."""
        if not token:
            return
        with store_errors(self._session, 'revoke session'):
            AuthSession.query.filter_by(token=token).delete(synchronize_session=False)
            self._session.commit()
    
    def purge_expired(self):
        """Delete every expired session and return how many went."""
        with store_errors(self._session, 'purge sessions'):
            removed = AuthSession.query.filter(
                AuthSession.expires_at <= self._clock()
            ).delete(synchronize_session=False)
            self._session.commit()
        logger.info('Purged %d expired sessions', removed)
        return removed
    
    def count_active(self):
        with store_errors(self._session, 'count sessions'):
            return AuthSession.query.filter(AuthSession.expires_at > self._clock()).count()
