"""End-to-end workflows driven through the command line."""

import pytest
from pathlib import Path
from kit.cli.main import cli
from kit.core.repository import Repository


@pytest.fixture
def kit(runner, cli_dir):
    """Invoke kit commands inside a fresh temporary directory."""
    def _kit(*args):
        result = runner.invoke(cli, list(args))
        assert result.exit_code == 0, result.output
        return result.output
    return _kit


@pytest.fixture
def m1(kit, cli_dir):
    """An initialized repository with hello.txt committed as 'm1'."""
    kit('init')
    Path('hello.txt').write_bytes(b'hi\n')
    kit('add', 'hello.txt')
    kit('commit', 'm1')
    return Repository(str(cli_dir))


def write(path, data):
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    Path(path).write_bytes(data.encode() if isinstance(data, str) else data)


class TestScenarios:
    """The reference workflows."""

    def test_initial_commit_and_add(self, kit, m1):
        assert len(m1.list_commits()) == 2
        assert m1.refs.get_current_branch() == 'master'
        assert m1.get_commit(m1.refs.read_branch('master')).message == 'm1'
        assert kit('log').count('===\n') == 2

    def test_unstage_when_identical(self, kit, m1):
        write('hello.txt', 'bye\n')
        kit('add', 'hello.txt')
        assert 'hello.txt' in Repository(str(m1.work_tree)).staging.additions

        write('hello.txt', 'hi\n')
        kit('add', 'hello.txt')
        assert Repository(str(m1.work_tree)).staging.additions == {}

    def test_fast_forward_merge(self, kit, m1):
        kit('branch', 'feat')
        kit('checkout', 'feat')
        write('f.txt', 'A')
        kit('add', 'f.txt')
        kit('commit', 'feat work')
        kit('checkout', 'master')
        commits_before = len(m1.list_commits())

        output = kit('merge', 'feat')

        assert 'Current branch fast-forwarded.' in output
        assert m1.refs.read_branch('master') == m1.refs.read_branch('feat')
        assert Path('f.txt').read_bytes() == b'A'
        assert len(m1.list_commits()) == commits_before

    def test_three_way_clean_merge(self, kit, m1):
        kit('branch', 'feat')
        write('a.txt', 'A')
        kit('add', 'a.txt')
        kit('commit', 'add a')
        kit('checkout', 'feat')
        write('b.txt', 'B')
        kit('add', 'b.txt')
        kit('commit', 'add b')
        kit('checkout', 'master')

        output = kit('merge', 'feat')

        head = m1.refs.head_commit()
        assert len(head.parents) == 2
        assert Path('a.txt').read_bytes() == b'A'
        assert Path('b.txt').read_bytes() == b'B'
        assert 'Encountered a merge conflict.' not in output

    def test_conflict_merge(self, kit, m1):
        kit('branch', 'feat')
        write('hello.txt', 'X')
        kit('add', 'hello.txt')
        kit('commit', 'x')
        kit('checkout', 'feat')
        write('hello.txt', 'Y')
        kit('add', 'hello.txt')
        kit('commit', 'y')
        kit('checkout', 'master')

        output = kit('merge', 'feat')

        expected = b'<<<<<<< HEAD\nX=======\nY>>>>>>>\n'
        assert Path('hello.txt').read_bytes() == expected
        assert 'Encountered a merge conflict.' in output
        head = m1.refs.head_commit()
        assert head.is_merge
        assert m1.get_blob(head.tree['hello.txt']) == expected

    def test_untracked_overwrite_guard(self, kit, m1):
        write('u.txt', 'U')
        kit('branch', 'feat')
        kit('checkout', 'feat')
        write('u.txt', 'V')
        kit('add', 'u.txt')
        kit('commit', 'add u')
        kit('checkout', 'master')
        write('u.txt', 'U')

        output = kit('checkout', 'feat')

        assert 'There is an untracked file in the way' in output
        assert Path('u.txt').read_bytes() == b'U'
        assert m1.refs.get_current_branch() == 'master'


class TestHistoryCommands:
    """log, global-log, find and status output."""

    def test_log_shows_merge_line(self, kit, m1):
        kit('branch', 'feat')
        write('a.txt', 'A')
        kit('add', 'a.txt')
        kit('commit', 'add a')
        kit('checkout', 'feat')
        write('b.txt', 'B')
        kit('add', 'b.txt')
        kit('commit', 'add b')
        kit('checkout', 'master')
        kit('merge', 'feat')

        output = kit('log')

        first_entry = output.split('===\n')[1]
        assert first_entry.splitlines()[1].startswith('Merge: ')
        assert 'Merged feat into master.' in first_entry
        # First-parent walk skips the feat commit
        assert 'add b' not in output
        assert output.rstrip().endswith('initial commit')

    def test_global_log_lists_every_commit(self, kit, m1):
        output = kit('global-log')
        for commit_hash in m1.list_commits():
            assert f'commit {commit_hash}' in output

    def test_find(self, kit, m1):
        assert kit('find', 'm1').strip() == m1.refs.head_commit_hash()
        assert 'Found no commit with that message.' in kit('find', 'nope')

    def test_status(self, kit, m1):
        kit('branch', 'other')
        write('new.txt', 'N')
        kit('add', 'new.txt')
        kit('rm', 'hello.txt')
        write('stray.txt', 'S')

        output = kit('status')

        assert output == (
            "=== Branches ===\n*master\nother\n\n"
            "=== Staged Files ===\nnew.txt\n\n"
            "=== Removed Files ===\nhello.txt\n\n"
            "=== Modifications Not Staged For Commit ===\n\n"
            "=== Untracked Files ===\nstray.txt\n\n"
        )

    def test_reset_with_abbreviated_id(self, kit, m1):
        first = m1.refs.head_commit_hash()
        write('hello.txt', 'two\n')
        kit('add', 'hello.txt')
        kit('commit', 'm2')

        kit('reset', first[:7])

        assert m1.refs.head_commit_hash() == first
        assert Path('hello.txt').read_bytes() == b'hi\n'
