"""
Post Routes

Reading is public. Writing needs a session, and edits/deletes go through
the store's owner-filtered operations so a non-owner never touches a row.
"""

import logging

from flask import abort, current_app, flash, redirect, render_template, request, url_for
from flask_login import current_user, login_required

from blog.auth.guards import require_ownership
from blog.errors import NotFoundError, StoreError, ValidationError
from blog.posts import posts_bp
from blog.services import get_services

logger = logging.getLogger(__name__)

NOT_YOURS = 'That post does not exist or is not yours to change.'


@posts_bp.route('/')
def home():
    """List every post, newest first."""
    posts = get_services().posts.list_all()
    return render_template('home.html',
                           starting_content=current_app.config['HOME_STARTING_CONTENT'],
                           posts=posts)


@posts_bp.route('/about')
def about():
    return render_template('about.html', about_content=current_app.config['ABOUT_CONTENT'])


@posts_bp.route('/contact')
def contact():
    return render_template('contact.html', contact_content=current_app.config['CONTACT_CONTENT'])


@posts_bp.route('/compose', methods=['GET', 'POST'])
@login_required
def compose():
    """Write a new post as the current user."""
    if request.method == 'POST':
        try:
            get_services().posts.create(
                request.form.get('post_title'),
                request.form.get('post_body'),
                author_id=current_user.id,
            )
        except ValidationError as e:
            flash(str(e), 'danger')
            return redirect(url_for('posts.compose'))
        except StoreError:
            flash('Could not save your post. Please try again.', 'danger')
            return redirect(url_for('posts.compose'))

        flash('Post published.', 'success')
        return redirect(url_for('posts.home'))

    return render_template('compose.html')


@posts_bp.route('/posts/<int:post_id>')
def show_post(post_id):
    try:
        post = get_services().posts.get(post_id)
    except NotFoundError:
        abort(404)

    return render_template('post.html',
                           post=post,
                           can_edit=require_ownership(current_user, post))


@posts_bp.route('/posts/<int:post_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_post(post_id):
    """Edit form and update for the post's author only."""
    posts = get_services().posts

    if request.method == 'POST':
        try:
            posts.update_owned(
                post_id,
                current_user.id,
                request.form.get('post_title'),
                request.form.get('post_body'),
            )
        except ValidationError as e:
            flash(str(e), 'danger')
            return redirect(url_for('posts.edit_post', post_id=post_id))
        except NotFoundError:
            logger.warning('User %s denied edit of post %s', current_user.id, post_id)
            flash(NOT_YOURS, 'warning')
            return redirect(url_for('posts.home'))
        except StoreError:
            flash('Could not save your changes. Please try again.', 'danger')
            return redirect(url_for('posts.home'))

        flash('Post updated.', 'success')
        return redirect(url_for('posts.home'))

    try:
        post = posts.get_owned(post_id, current_user.id)
    except NotFoundError:
        flash(NOT_YOURS, 'warning')
        return redirect(url_for('posts.home'))

    return render_template('edit.html', post=post)


@posts_bp.route('/posts/<int:post_id>/delete', methods=['POST'])
@login_required
def delete_post(post_id):
    try:
        get_services().posts.delete_owned(post_id, current_user.id)
    except NotFoundError:
        logger.warning('User %s denied delete of post %s', current_user.id, post_id)
        flash(NOT_YOURS, 'warning')
        return redirect(url_for('posts.home'))
    except StoreError:
        flash('Could not delete the post. Please try again.', 'danger')
        return redirect(url_for('posts.home'))

    flash('Post deleted.', 'info')
    return redirect(url_for('posts.home'))
