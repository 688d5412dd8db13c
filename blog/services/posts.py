"""
Post Store

Edits and deletes are single conditional statements filtered on both the
post id and the author id, so the ownership check and the write cannot be
separated by another request.
"""

import logging

from blog.errors import NotFoundError, ValidationError
from blog.models import Post
from blog.services.base import store_errors

logger = logging.getLogger(__name__)


def _clean(title, content):
    title = (title or '').strip()
    content = (content or '').strip()
    if not title or not content:
        raise ValidationError('Posts need both a title and a body.')
    return title, content


class PostStore:
    """Read and write blog posts."""
    
    def __init__(self, session):
        self._session = session
    
    def list_all(self):
        with store_errors(self._session, 'list posts'):
            return Post.query.order_by(Post.created_at.desc(), Post.id.desc()).all()
    
    def get(self, post_id):
        with store_errors(self._session, 'load post'):
            post = self._session.get(Post, post_id)
        if post is None:
            raise NotFoundError(f'Post {post_id} does not exist.')
        return post
    
    def get_owned(self, post_id, author_id):
        """Return the post only if `author_id` wrote it."""
        with store_errors(self._session, 'load post'):
            post = Post.query.filter_by(id=post_id, author_id=author_id).first()
        if post is None:
            raise NotFoundError(f'Post {post_id} not found for user {author_id}.')
        return post
    
    def create(self, title, content, author_id):
        if author_id is None:
            raise ValidationError('Posts must have an author.')
        title, content = _clean(title, content)
        post = Post(title=title, content=content, author_id=author_id)
        with store_errors(self._session, 'save post'):
            self._session.add(post)
            self._session.commit()
        logger.info('User %s created post %s', author_id, post.id)
        return post
    
    def update_owned(self, post_id, author_id, title, content):
        """Update title/content where id and author both match.
        
        Raises:
            ValidationError: empty title or body
            NotFoundError: no such post, or `author_id` does not own it
        """
        title, content = _clean(title, content)
        with store_errors(self._session, 'update post'):
            updated = Post.query.filter_by(id=post_id, author_id=author_id).update(
                {'title': title, 'content': content},
                synchronize_session=False,
            )
            self._session.commit()
        if not updated:
            raise NotFoundError(f'Post {post_id} not found for user {author_id}.')
        logger.info('User %s updated post %s', author_id, post_id)
        return self.get(post_id)
    
    def delete_owned(self, post_id, author_id):
        """Delete where id and author both match. Raises NotFoundError otherwise."""
        with store_errors(self._session, 'delete post'):
            deleted = Post.query.filter_by(id=post_id, author_id=author_id).delete(
                synchronize_session=False,
            )
            self._session.commit()
        if not deleted:
            raise NotFoundError(f'Post {post_id} not found for user {author_id}.')
        logger.info('User %s deleted post %s', author_id, post_id)
    
    def count(self):
        with store_errors(self._session, 'count posts'):
            return Post.query.count()
