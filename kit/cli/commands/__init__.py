"""CLI commands for Kit."""

from kit.cli.commands.init import init_cmd
from kit.cli.commands.add import add_cmd
from kit.cli.commands.rm import rm_cmd
from kit.cli.commands.commit import commit_cmd
from kit.cli.commands.checkout import checkout_cmd
from kit.cli.commands.branch import branch_cmd, rm_branch_cmd
from kit.cli.commands.log import log_cmd, global_log_cmd, find_cmd
from kit.cli.commands.status import status_cmd
from kit.cli.commands.reset import reset_cmd
from kit.cli.commands.merge import merge_cmd
from kit.cli.commands.remote import (add_remote_cmd, rm_remote_cmd, push_cmd,
                                     fetch_cmd, pull_cmd)
from kit.cli.commands.config import config_cmd

__all__ = ['init_cmd', 'add_cmd', 'rm_cmd', 'commit_cmd', 'checkout_cmd',
           'branch_cmd', 'rm_branch_cmd', 'log_cmd', 'global_log_cmd', 'find_cmd',
           'status_cmd', 'reset_cmd', 'merge_cmd', 'add_remote_cmd', 'rm_remote_cmd',
           'push_cmd', 'fetch_cmd', 'pull_cmd', 'config_cmd']
