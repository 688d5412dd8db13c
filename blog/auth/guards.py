"""
Authorization Guards

Plain predicates over the resolved identity. The route decorators
(`login_required`, `admin_required`) and the post handlers call these.
"""


def is_anonymous(identity):
    return identity is None or not getattr(identity, 'is_authenticated', False)


def require_authenticated(identity):
    """True when the request carries a live session."""
    return not is_anonymous(identity)


def require_admin(identity):
    """True only for an authenticated user with the admin flag."""
    return require_authenticated(identity) and bool(getattr(identity, 'is_admin', False))


def require_ownership(identity, post):
    """True only when `identity` wrote `post`.
    
    A missing post and someone else's post both come back False, so callers
    cannot tell them apart.
    """
    if post is None or not require_authenticated(identity):
        return False
    return post.author_id == identity.id
