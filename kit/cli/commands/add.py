"""Add command - stage files for commit."""

import click
from kit.core.errors import KitError
from kit.cli.command import KitCommand, open_repository
from kit.cli.output import error


@click.command('add', cls=KitCommand)
@click.argument('path')
def add_cmd(path):
    """
    Stage a file for the next commit.

    If the file is identical to the version in the current commit, any
    staged change to it is dropped instead.

    Examples:
        kit add hello.txt
    """
    try:
        repo = open_repository()
        repo.staging.add_file(path)
    except KitError as e:
        click.echo(error(str(e)))
