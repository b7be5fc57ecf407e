"""Log commands - show commit history."""

import click
from kit.core.errors import KitError
from kit.operations.history import (
    find_by_message, format_log_entry, iter_commits, walk_first_parent,
)
from kit.cli.command import KitCommand, open_repository
from kit.cli.output import error


@click.command('log', cls=KitCommand)
def log_cmd():
    """
    Show the history of the current branch.

    Follows first parents from the current commit back to the initial
    commit. Merge commits list both parents.
    """
    try:
        repo = open_repository()
        head = repo.refs.head_commit_hash()
        for commit_hash, commit in walk_first_parent(repo, head):
            click.echo(format_log_entry(commit_hash, commit))
    except KitError as e:
        click.echo(error(str(e)))


@click.command('global-log', cls=KitCommand)
def global_log_cmd():
    """Show every commit ever made, in no particular order."""
    try:
        repo = open_repository()
        for commit_hash, commit in iter_commits(repo):
            click.echo(format_log_entry(commit_hash, commit))
    except KitError as e:
        click.echo(error(str(e)))


@click.command('find', cls=KitCommand)
@click.argument('message')
def find_cmd(message):
    """
    Print the ids of all commits with exactly the given message.

    Examples:
        kit find "initial commit"
    """
    try:
        repo = open_repository()
        matches = find_by_message(repo, message)
    except KitError as e:
        click.echo(error(str(e)))
        return

    if not matches:
        click.echo(error("Found no commit with that message."))
        return

    for commit_hash in matches:
        click.echo(commit_hash)
