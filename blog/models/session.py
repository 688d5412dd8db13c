"""
Session Model

Server-side record behind the opaque `blog_session` cookie.
"""

from blog.extensions import db


class AuthSession(db.Model):
    """Login session with a fixed expiry."""
    __tablename__ = 'sessions'
    
    token = db.Column(db.String(64), primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, nullable=False)
    expires_at = db.Column(db.DateTime, nullable=False, index=True)
    
    user = db.relationship('User', lazy='joined')
    
    def is_expired(self, now):
        return self.expires_at <= now
    
    def __repr__(self):
        return f'<AuthSession User:{self.user_id} expires:{self.expires_at}>'
