"""Shared click plumbing for Kit commands."""

import click

from kit.cli.output import error
from kit.core.errors import BadArgs, NotInitialized
from kit.core.repository import Repository


class KitCommand(click.Command):
    """
    Command that reports bad operands as a single line and exits 0.

    The unparsed arguments are kept in ctx.meta['operands'] because click
    drops the '--' separator that checkout relies on.
    """

    def parse_args(self, ctx, args):
        ctx.meta['operands'] = list(args)
        try:
            return super().parse_args(ctx, args)
        except click.UsageError:
            click.echo(error(BadArgs.message))
            ctx.exit(0)


def open_repository() -> Repository:
    """
    Find the repository containing the current directory.

    Raises:
        NotInitialized: If there is none
    """
    repo = Repository.find_repository()
    if repo is None:
        raise NotInitialized()
    return repo
