"""Integration tests for remote commands."""

import os
import pytest
from pathlib import Path
from kit.cli.main import cli
from kit.core.repository import Repository


@pytest.fixture
def two_repos(runner, cli_dir):
    """'local' and 'shared' repositories side by side; cwd is 'local'."""
    for name in ('shared', 'local'):
        (cli_dir / name).mkdir()
        os.chdir(cli_dir / name)
        runner.invoke(cli, ['init'])
    return Repository(str(cli_dir / 'local')), Repository(str(cli_dir / 'shared'))


def commit(runner, path, data, message):
    Path(path).write_text(data)
    runner.invoke(cli, ['add', path])
    runner.invoke(cli, ['commit', message])


class TestRemoteCommands:
    """Tests for add-remote, rm-remote, push, fetch and pull."""

    def test_add_and_remove_remote(self, runner, two_repos):
        local, _ = two_repos

        result = runner.invoke(cli, ['add-remote', 'origin', '../shared/.kit'])
        assert result.exit_code == 0
        assert local.remote.list_remotes() == {'origin': '../shared/.kit'}

        result = runner.invoke(cli, ['add-remote', 'origin', '../elsewhere'])
        assert 'A remote with that name already exists.' in result.output

        runner.invoke(cli, ['rm-remote', 'origin'])
        assert local.remote.list_remotes() == {}

        result = runner.invoke(cli, ['rm-remote', 'origin'])
        assert 'A remote with that name does not exist.' in result.output

    def test_push(self, runner, two_repos):
        local, shared = two_repos
        runner.invoke(cli, ['add-remote', 'origin', '../shared/.kit'])
        commit(runner, 'a.txt', 'A', 'local work')

        result = runner.invoke(cli, ['push', 'origin', 'master'])

        assert result.exit_code == 0
        assert shared.refs.read_branch('master') == local.refs.head_commit_hash()

    def test_push_needs_pull_first(self, runner, two_repos):
        local, shared = two_repos
        runner.invoke(cli, ['add-remote', 'origin', '../shared'])
        commit(runner, 'a.txt', 'A', 'local work')
        os.chdir(shared.work_tree)
        commit(runner, 'b.txt', 'B', 'shared work')
        os.chdir(local.work_tree)

        result = runner.invoke(cli, ['push', 'origin', 'master'])

        assert 'Please pull down remote changes before pushing.' in result.output

    def test_fetch_creates_remote_branch(self, runner, two_repos):
        local, shared = two_repos
        os.chdir(shared.work_tree)
        commit(runner, 'b.txt', 'B', 'shared work')
        os.chdir(local.work_tree)
        runner.invoke(cli, ['add-remote', 'origin', '../shared'])

        result = runner.invoke(cli, ['fetch', 'origin', 'master'])

        assert result.exit_code == 0
        assert local.refs.read_branch('origin/master') == shared.refs.head_commit_hash()
        status = runner.invoke(cli, ['status']).output
        assert '*master\norigin/master\n' in status

    def test_fetch_unknown_branch(self, runner, two_repos):
        runner.invoke(cli, ['add-remote', 'origin', '../shared'])
        result = runner.invoke(cli, ['fetch', 'origin', 'nope'])
        assert 'That remote does not have that branch.' in result.output

    def test_fetch_missing_directory(self, runner, two_repos):
        runner.invoke(cli, ['add-remote', 'origin', '../gone'])
        result = runner.invoke(cli, ['fetch', 'origin', 'master'])
        assert 'Remote directory not found.' in result.output

    def test_pull(self, runner, two_repos):
        local, shared = two_repos
        os.chdir(shared.work_tree)
        commit(runner, 'b.txt', 'B', 'shared work')
        os.chdir(local.work_tree)
        runner.invoke(cli, ['add-remote', 'origin', '../shared'])

        result = runner.invoke(cli, ['pull', 'origin', 'master'])

        assert 'Current branch fast-forwarded.' in result.output
        assert Path('b.txt').read_text() == 'B'
