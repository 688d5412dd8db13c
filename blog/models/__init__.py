"""
Models Package

Exports all models for easy importing.
"""

from blog.models.user import User
from blog.models.post import Post
from blog.models.session import AuthSession

__all__ = ['User', 'Post', 'AuthSession']
