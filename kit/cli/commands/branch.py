"""Branch commands - create and delete branches."""

import click
from kit.core.errors import KitError
from kit.operations.checkout import Navigator
from kit.cli.command import KitCommand, open_repository
from kit.cli.output import success, error


@click.command('branch', cls=KitCommand)
@click.argument('name')
def branch_cmd(name):
    """
    Create a branch at the current commit.

    The new branch is not checked out.

    Examples:
        kit branch feature
    """
    try:
        repo = open_repository()
        Navigator(repo).create_branch(name)
    except KitError as e:
        click.echo(error(str(e)))
        return

    click.echo(success(f"Created branch '{name}'"))


@click.command('rm-branch', cls=KitCommand)
@click.argument('name')
def rm_branch_cmd(name):
    """
    Delete a branch pointer.

    Commits made on the branch stay in the repository.

    Examples:
        kit rm-branch feature
    """
    try:
        repo = open_repository()
        Navigator(repo).remove_branch(name)
    except KitError as e:
        click.echo(error(str(e)))
        return

    click.echo(success(f"Deleted branch '{name}'"))
