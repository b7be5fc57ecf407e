"""Rm command - unstage or untrack files."""

import click
from kit.core.errors import KitError
from kit.cli.command import KitCommand, open_repository
from kit.cli.output import error


@click.command('rm', cls=KitCommand)
@click.argument('path')
def rm_cmd(path):
    """
    Unstage a file, or stop tracking it.

    A file tracked by the current commit is staged for removal and
    deleted from the working directory.

    Examples:
        kit rm hello.txt
    """
    try:
        repo = open_repository()
        repo.staging.remove_file(path)
    except KitError as e:
        click.echo(error(str(e)))
