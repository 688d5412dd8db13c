"""
Flask CLI commands

    flask --app app create-admin admin@example.com s3cret
    flask --app app purge-sessions
"""

import click
from flask.cli import with_appcontext

from blog.errors import ValidationError
from blog.services import get_services


@click.command('create-admin')
@click.argument('email')
@click.argument('password')
@with_appcontext
def create_admin_command(email, password):
    """Create an admin user, or promote an existing one."""
    try:
        user = get_services().auth.ensure_admin(email, password)
    except ValidationError as e:
        raise click.BadParameter(str(e))
    click.echo(f'{user.email} is now an administrator')


@click.command('purge-sessions')
@with_appcontext
def purge_sessions_command():
    """Delete expired login sessions."""
    removed = get_services().sessions.purge_expired()
    click.echo(f'Removed {removed} expired session(s)')


def register_commands(app):
    app.cli.add_command(create_admin_command)
    app.cli.add_command(purge_sessions_command)
