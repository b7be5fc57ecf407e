"""Initialize a new Kit repository."""

import click
from kit.core.errors import KitError
from kit.core.repository import Repository
from kit.cli.command import KitCommand
from kit.cli.output import success, error, info


@click.command('init', cls=KitCommand)
def init_cmd():
    """
    Initialize a new Kit repository.

    Creates a .kit directory in the current directory, records the
    initial commit and points the 'master' branch at it.

    Examples:
        kit init
    """
    try:
        repo = Repository('.').init()
    except KitError as e:
        click.echo(error(str(e)))
        return

    click.echo(success(f"Initialized empty Kit repository in {repo.kit_dir}"))
    click.echo(info("You can now start tracking files with:"))
    click.echo(info("  kit add <file>"))
    click.echo(info("  kit commit '<message>'"))
