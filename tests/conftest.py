"""Shared pytest fixtures for Kit tests."""

import pytest
import tempfile
import shutil
from pathlib import Path
from click.testing import CliRunner
from kit.core.config import Config
from kit.core.repository import Repository
from kit.core.objects import Blob
from kit.operations.commit import CommitEngine


@pytest.fixture(autouse=True)
def isolated_global_config(tmp_path_factory, monkeypatch):
    """Keep tests away from the user's ~/.kitconfig and KIT_* variables."""
    home = tmp_path_factory.mktemp('home')
    monkeypatch.setattr(Config, 'GLOBAL_CONFIG_PATH', home / '.kitconfig')
    monkeypatch.delenv('KIT_LOG_LEVEL', raising=False)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    return Repository(str(temp_dir)).init()


@pytest.fixture
def sample_blob():
    """Create a sample blob object."""
    return Blob(b"Hello, World!\n")


@pytest.fixture
def write_file():
    """Write bytes (or text) into a repository's working tree."""
    def _write(repo, path, data):
        if isinstance(data, str):
            data = data.encode()
        repo.worktree.write(path, data)
        return repo.work_tree / path
    return _write


@pytest.fixture
def commit_files(write_file):
    """
    Write, stage and commit files in one step.

    Usage: commit_files(repo, {'a.txt': 'A'}, 'message') -> commit hash
    """
    def _commit(repo, files, message="Test commit"):
        for path, data in files.items():
            write_file(repo, path, data)
            repo.staging.add_file(path)
        return CommitEngine(repo).commit(message)
    return _commit


@pytest.fixture
def runner():
    """Click test runner."""
    return CliRunner()


@pytest.fixture
def cli_dir(temp_dir, monkeypatch):
    """Run CLI commands from inside an empty temporary directory."""
    monkeypatch.chdir(temp_dir)
    return temp_dir
