"""
Store Helpers

Shared plumbing for the SQLAlchemy-backed stores.
"""

import logging
from contextlib import contextmanager
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError

from blog.errors import StoreError

logger = logging.getLogger(__name__)


def utcnow():
    """Naive UTC timestamp, matching what SQLite hands back."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@contextmanager
def store_errors(session, action):
    """Roll back and re-raise any database failure as StoreError."""
    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception('Store failure while trying to %s', action)
        raise StoreError(f'Could not {action}.') from exc
