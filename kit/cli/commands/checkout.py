"""Checkout command - switch branches or restore files."""

import click
from kit.core.errors import BadArgs, KitError
from kit.operations.checkout import Navigator
from kit.cli.command import KitCommand, open_repository
from kit.cli.output import success, error


@click.command('checkout', cls=KitCommand)
@click.argument('operands', nargs=-1)
@click.pass_context
def checkout_cmd(ctx, operands):
    """
    Switch branches or restore files.

    \b
    Forms:
        kit checkout -- <file>             Restore file from the current commit
        kit checkout <commit> -- <file>    Restore file from a commit
        kit checkout <branch>              Switch to a branch

    Commit ids may be abbreviated.
    """
    args = ctx.meta.get('operands', list(operands))

    try:
        repo = open_repository()
        navigator = Navigator(repo)

        if len(args) == 2 and args[0] == '--':
            navigator.checkout_file(args[1])
        elif len(args) == 3 and args[1] == '--':
            navigator.checkout_file_at(args[0], args[2])
        elif len(args) == 1 and args[0] != '--':
            navigator.checkout_branch(args[0])
            click.echo(success(f"Switched to branch '{args[0]}'"))
        else:
            raise BadArgs()
    except KitError as e:
        click.echo(error(str(e)))
