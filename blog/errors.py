"""
Error Taxonomy

Stores and services raise these; route handlers decide whether they become
a flash-and-redirect or a generic server error.
"""


class BlogError(Exception):
    """Base class for application errors."""


class ValidationError(BlogError):
    """Input has the wrong shape (empty fields, missing author)."""


class DuplicateUserError(ValidationError):
    """A user with this email already exists."""


class AuthenticationError(BlogError):
    """Login failed: unknown email or wrong password, never which."""


class AuthorizationError(BlogError):
    """Authenticated, but not allowed to do this."""


class NotFoundError(BlogError):
    """The resource does not exist or is not visible to the caller."""


class StoreError(BlogError):
    """The backing database failed."""
