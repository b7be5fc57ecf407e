"""Merge command - join another branch into the current one."""

import click
from kit.core.errors import KitError
from kit.operations.merge import MergeResult, ALREADY_MERGED
from kit.cli.command import KitCommand, open_repository
from kit.cli.output import success, error, info, warning


def report_merge(result: MergeResult) -> None:
    """Print the outcome of a merge."""
    if result.outcome == ALREADY_MERGED:
        click.echo(info("Given branch is an ancestor of the current branch."))
    elif result.is_fast_forward:
        click.echo(success("Current branch fast-forwarded."))
    elif result.has_conflicts:
        click.echo(warning("Encountered a merge conflict."))
    else:
        click.echo(success(f"Created merge commit {result.commit_hash[:7]}"))


@click.command('merge', cls=KitCommand)
@click.argument('branch')
def merge_cmd(branch):
    """
    Merge a branch into the current branch.

    Files are merged against the latest common ancestor. Conflicting
    files get conflict markers and are committed as they are.

    Examples:
        kit merge feature
    """
    try:
        repo = open_repository()
        result = repo.merge.merge(branch)
    except KitError as e:
        click.echo(error(str(e)))
        return

    report_merge(result)
