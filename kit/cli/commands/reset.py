"""Reset command - move the current branch to a commit."""

import click
from kit.core.errors import KitError
from kit.operations.checkout import Navigator
from kit.cli.command import KitCommand, open_repository
from kit.cli.output import success, error


@click.command('reset', cls=KitCommand)
@click.argument('commit')
def reset_cmd(commit):
    """
    Check out a commit and move the current branch to it.

    Files tracked by the current commit but not by the target are
    deleted. The staging area is cleared. Commit ids may be abbreviated.

    Examples:
        kit reset a1b2c3d
    """
    try:
        repo = open_repository()
        Navigator(repo).reset(commit)
    except KitError as e:
        click.echo(error(str(e)))
        return

    head = repo.refs.head_commit_hash()
    click.echo(success(f"HEAD is now at {head[:7]}"))
