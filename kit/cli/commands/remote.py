"""Remote commands - register remotes and sync with them."""

import click
from kit.core.errors import KitError
from kit.cli.command import KitCommand, open_repository
from kit.cli.commands.merge import report_merge
from kit.cli.output import success, error, info


@click.command('add-remote', cls=KitCommand)
@click.argument('name')
@click.argument('path')
def add_remote_cmd(name, path):
    """
    Register another repository on this machine as a remote.

    PATH may name the other repository's directory or its .kit directory.
    Relative paths are taken from this repository's root.

    Examples:
        kit add-remote origin ../shared
        kit add-remote backup /srv/kit/project/.kit
    """
    try:
        repo = open_repository()
        repo.remote.add_remote(name, path)
    except KitError as e:
        click.echo(error(str(e)))
        return

    click.echo(success(f"Added remote '{name}' -> {path}"))


@click.command('rm-remote', cls=KitCommand)
@click.argument('name')
def rm_remote_cmd(name):
    """Forget a remote. Branches fetched from it are kept."""
    try:
        repo = open_repository()
        repo.remote.remove_remote(name)
    except KitError as e:
        click.echo(error(str(e)))
        return

    click.echo(success(f"Removed remote '{name}'"))


@click.command('push', cls=KitCommand)
@click.argument('remote')
@click.argument('branch')
def push_cmd(remote, branch):
    """
    Copy the current branch's history to a remote branch.

    The remote branch must already be part of the local history.

    Examples:
        kit push origin master
    """
    try:
        repo = open_repository()
        commit_hash = repo.remote.push(remote, branch)
    except KitError as e:
        click.echo(error(str(e)))
        return

    click.echo(success(f"Pushed {commit_hash[:7]} to {remote}/{branch}"))


@click.command('fetch', cls=KitCommand)
@click.argument('remote')
@click.argument('branch')
def fetch_cmd(remote, branch):
    """
    Copy a remote branch's history into this repository.

    The fetched commit becomes the local branch REMOTE/BRANCH.

    Examples:
        kit fetch origin master
    """
    try:
        repo = open_repository()
        commit_hash = repo.remote.fetch(remote, branch)
    except KitError as e:
        click.echo(error(str(e)))
        return

    click.echo(success(f"Fetched {remote}/{branch} at {commit_hash[:7]}"))


@click.command('pull', cls=KitCommand)
@click.argument('remote')
@click.argument('branch')
def pull_cmd(remote, branch):
    """
    Fetch a remote branch and merge it into the current branch.

    Examples:
        kit pull origin master
    """
    try:
        repo = open_repository()
        click.echo(info(f"Pulling {remote}/{branch}"))
        result = repo.remote.pull(remote, branch)
    except KitError as e:
        click.echo(error(str(e)))
        return

    report_merge(result)
