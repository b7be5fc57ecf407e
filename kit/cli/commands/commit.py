"""Commit command - create a commit from staged changes."""

import click
from kit.core.errors import KitError
from kit.operations.commit import CommitEngine
from kit.cli.command import KitCommand, open_repository
from kit.cli.output import success, error


@click.command('commit', cls=KitCommand)
@click.argument('message', required=False, default='')
def commit_cmd(message):
    """
    Record staged changes in a new commit.

    Examples:
        kit commit "Add greeting"
    """
    try:
        repo = open_repository()
        commit_hash = CommitEngine(repo).commit(message)
    except KitError as e:
        click.echo(error(str(e)))
        return

    branch = repo.refs.get_current_branch()
    click.echo(success(f"[{branch} {commit_hash[:7]}] {message}"))
