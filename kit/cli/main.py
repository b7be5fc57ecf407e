"""Main CLI entry point for Kit."""

import logging
import os

import click
from colorama import init

from kit import __version__
from kit.cli.output import BANNER, error
from kit.cli.commands import (init_cmd, add_cmd, rm_cmd, commit_cmd, checkout_cmd,
                              branch_cmd, rm_branch_cmd, log_cmd, global_log_cmd,
                              find_cmd, status_cmd, reset_cmd, merge_cmd,
                              add_remote_cmd, rm_remote_cmd, push_cmd, fetch_cmd,
                              pull_cmd, config_cmd)

# Initialize colorama for cross-platform colored output
init(autoreset=True)

LOG_FORMAT = '%(levelname)s %(name)s: %(message)s'


class KitGroup(click.Group):
    """Custom Group class to display banner before help and report unknown commands."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)

    def resolve_command(self, ctx, args):
        if args and self.get_command(ctx, args[0]) is None and not ctx.resilient_parsing:
            click.echo(error("No command with that name exists."))
            ctx.exit(0)
        return super().resolve_command(ctx, args)


def configure_logging(verbose: bool) -> None:
    """WARNING by default; DEBUG with --verbose; KIT_LOG_LEVEL overrides both."""
    level_name = os.environ.get('KIT_LOG_LEVEL', 'DEBUG' if verbose else 'WARNING')
    level = getattr(logging, level_name.upper(), logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger('kit').setLevel(level)


@click.group(cls=KitGroup, invoke_without_command=True)
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Show debug logging')
@click.pass_context
def cli(ctx, verbose):
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        click.echo(error("Please enter a command."))


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(commit_cmd)
cli.add_command(rm_cmd)
cli.add_command(checkout_cmd)
cli.add_command(branch_cmd)
cli.add_command(rm_branch_cmd)
cli.add_command(log_cmd)
cli.add_command(global_log_cmd)
cli.add_command(find_cmd)
cli.add_command(status_cmd)
cli.add_command(reset_cmd)
cli.add_command(merge_cmd)
cli.add_command(add_remote_cmd)
cli.add_command(rm_remote_cmd)
cli.add_command(push_cmd)
cli.add_command(fetch_cmd)
cli.add_command(pull_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
