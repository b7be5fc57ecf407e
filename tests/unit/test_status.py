"""Unit tests for status computation."""

from kit.operations.checkout import Navigator
from kit.operations.status import compute_status


def test_clean_repository(repo):
    report = compute_status(repo)
    assert report.current_branch == 'master'
    assert report.branches == ['master']
    assert report.staged == report.removed == report.untracked == []
    assert report.unstaged == []


def test_format_sections(repo):
    assert compute_status(repo).format() == (
        "=== Branches ===\n"
        "*master\n"
        "\n"
        "=== Staged Files ===\n"
        "\n"
        "=== Removed Files ===\n"
        "\n"
        "=== Modifications Not Staged For Commit ===\n"
        "\n"
        "=== Untracked Files ===\n"
        "\n"
    )


def test_full_report(repo, write_file, commit_files):
    commit_files(repo, {'kept.txt': 'K', 'gone.txt': 'G', 'edit.txt': 'E', 'drop.txt': 'D'}, 'm1')
    Navigator(repo).create_branch('other-branch')

    write_file(repo, 'wug.txt', 'W')
    repo.staging.add_file('wug.txt')
    repo.staging.remove_file('drop.txt')
    write_file(repo, 'edit.txt', 'E2')
    (repo.work_tree / 'gone.txt').unlink()
    write_file(repo, 'random.stuff', 'R')

    report = compute_status(repo)

    assert report.branches == ['master', 'other-branch']
    assert report.staged == ['wug.txt']
    assert report.removed == ['drop.txt']
    assert report.unstaged == ['edit.txt (modified)', 'gone.txt (deleted)']
    assert report.untracked == ['random.stuff']
    assert "*master\nother-branch\n" in report.format()


def test_staged_file_changed_or_deleted_afterwards(repo, write_file):
    write_file(repo, 'a.txt', 'A')
    write_file(repo, 'b.txt', 'B')
    repo.staging.add_file('a.txt')
    repo.staging.add_file('b.txt')
    write_file(repo, 'a.txt', 'A2')
    (repo.work_tree / 'b.txt').unlink()

    assert compute_status(repo).unstaged == ['a.txt (modified)', 'b.txt (deleted)']


def test_removed_file_recreated_is_untracked(repo, write_file, commit_files):
    commit_files(repo, {'a.txt': 'A'}, 'm1')
    repo.staging.remove_file('a.txt')
    write_file(repo, 'a.txt', 'again')

    report = compute_status(repo)

    assert report.removed == ['a.txt']
    assert report.untracked == ['a.txt']
    assert report.unstaged == []


def test_dotfiles_are_ordinary_files(repo, write_file, commit_files):
    commit_files(repo, {'.env': 'A=1'}, 'm1')
    write_file(repo, '.config/settings', 'x')

    report = compute_status(repo)

    assert report.deleted == []
    assert report.modified == []
    assert report.untracked == ['.config/settings']


def test_kit_directory_is_not_listed(repo, write_file):
    write_file(repo, 'sub/file.txt', 'x')
    assert compute_status(repo).untracked == ['sub/file.txt']
