"""Status command - show working tree status."""

import click
from kit.core.errors import KitError
from kit.operations.status import compute_status
from kit.cli.command import KitCommand, open_repository
from kit.cli.output import error


@click.command('status', cls=KitCommand)
def status_cmd():
    """
    Show branches, staged changes and working tree differences.

    \b
    Sections:
        Branches                              (* marks the current branch)
        Staged Files
        Removed Files
        Modifications Not Staged For Commit
        Untracked Files
    """
    try:
        repo = open_repository()
        report = compute_status(repo)
    except KitError as e:
        click.echo(error(str(e)))
        return

    click.echo(report.format(), nl=False)
