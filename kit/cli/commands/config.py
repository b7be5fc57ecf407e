"""Config command - manage repository configuration."""

import click
from kit.core.config import get_config
from kit.core.errors import KitError
from kit.cli.command import open_repository
from kit.cli.output import success, error, info


def split_key(key):
    """Split 'section.option' into its parts; bare keys live in [core]."""
    if '.' in key:
        return tuple(key.rsplit('.', 1))
    return 'core', key


def load_config(is_global):
    """Return the Config to use, or None after reporting an error."""
    if is_global:
        return get_config()
    try:
        return open_repository().config
    except KitError as e:
        click.echo(error(f"{e} (use --global for global config)"))
        return None


@click.group('config')
def config_cmd():
    """Get and set repository or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
def config_set(key, value, is_global):
    """
    Set a config value.

    Examples:
        kit config set core.editor vim
        kit config set --global core.editor vim
    """
    config = load_config(is_global)
    if config is None:
        return

    section, option = split_key(key)
    config.set(section, option, value, global_config=is_global)

    scope = "global" if is_global else "repository"
    click.echo(success(f"Set {scope} config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Get global config only')
def config_get(key, is_global):
    """
    Get a config value.

    Environment variables named KIT_<SECTION>_<KEY> take precedence.

    Examples:
        kit config get core.repositoryformatversion
    """
    config = get_config() if is_global else load_config(False)
    if config is None:
        return

    section, option = split_key(key)
    value = config.get(section, option)
    if value is None:
        click.echo(error(f"Config key not found: {key}"))
        return
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Unset global config')
def config_unset(key, is_global):
    """
    Remove a config value.

    Examples:
        kit config unset core.editor
    """
    config = load_config(is_global)
    if config is None:
        return

    section, option = split_key(key)
    if not config.unset(section, option, global_config=is_global):
        click.echo(error(f"Config key not found: {key}"))
        return
    click.echo(success(f"Unset {key}"))


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
def config_list(is_global):
    """
    List all config values.

    Examples:
        kit config list
        kit config list --global
    """
    config = load_config(is_global)
    if config is None:
        return

    values = config.list_all(global_only=is_global)
    if not values:
        click.echo(info("No configuration set"))
        return

    for section, options in values.items():
        for key, value in options.items():
            click.echo(f"{section}.{key}={value}")
