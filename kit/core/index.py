"""Staging area implementation."""

import logging
from pathlib import Path
from typing import Dict
from .errors import FileMissing, NothingToRemove
from .hash import hash_object

logger = logging.getLogger(__name__)


class StagingArea:
    """
    Kit staging area implementation.

    Holds two disjoint mappings, additions and removals, both keyed by
    path. Each entry is persisted as its own file named by the SHA-1 of
    the path, so distinct paths never collide on disk.
    """

    def __init__(self, repo):
        """
        Initialize staging area and load it from disk.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.additions: Dict[str, str] = {}
        self.removals: Dict[str, str] = {}
        self.read()

    def _entry_file(self, directory: Path, path: str) -> Path:
        return directory / hash_object(path.encode())

    def _read_dir(self, directory: Path) -> Dict[str, str]:
        entries = {}
        if not directory.exists():
            return entries

        for entry_file in directory.iterdir():
            if entry_file.is_file():
                sha1, path = entry_file.read_text().split(' ', 1)
                entries[path] = sha1

        return dict(sorted(entries.items()))

    def _write_entry(self, directory: Path, path: str, sha1: str) -> None:
        directory.mkdir(parents=True, exist_ok=True)
        self._entry_file(directory, path).write_text(f"{sha1} {path}")

    def _drop_entry(self, directory: Path, path: str) -> None:
        entry_file = self._entry_file(directory, path)
        if entry_file.exists():
            entry_file.unlink()

    def read(self) -> None:
        """Reload additions and removals from disk."""
        self.additions = self._read_dir(self.repo.additions_dir)
        self.removals = self._read_dir(self.repo.removals_dir)

    def stage_addition(self, path: str, sha1: str) -> None:
        """Queue path with blob sha1 for the next commit."""
        self.cancel_removal(path)
        self.additions[path] = sha1
        self._write_entry(self.repo.additions_dir, path, sha1)
        logger.debug("Staged addition %s (%s)", path, sha1)

    def stage_removal(self, path: str, sha1: str) -> None:
        """Queue path for untracking; sha1 is its blob in HEAD."""
        self.cancel_addition(path)
        self.removals[path] = sha1
        self._write_entry(self.repo.removals_dir, path, sha1)
        logger.debug("Staged removal %s", path)

    def cancel_addition(self, path: str) -> bool:
        if path not in self.additions:
            return False
        del self.additions[path]
        self._drop_entry(self.repo.additions_dir, path)
        return True

    def cancel_removal(self, path: str) -> bool:
        if path not in self.removals:
            return False
        del self.removals[path]
        self._drop_entry(self.repo.removals_dir, path)
        return True

    def add_file(self, path: str) -> bool:
        """
        Stage a working file for commit.

        If the file matches the version in HEAD, any pending addition or
        removal of it is cancelled instead.

        Args:
            path: File path relative to the working tree

        Returns:
            bool: True if the file was staged, False if it was unstaged

        Raises:
            FileMissing: If the working file does not exist
        """
        data = self.repo.worktree.read(path)
        if data is None:
            raise FileMissing()

        sha1 = hash_object(data)
        head_tree = self.repo.refs.head_commit().tree

        if head_tree.get(path) == sha1:
            self.cancel_addition(path)
            self.cancel_removal(path)
            logger.debug("%s matches HEAD, unstaged", path)
            return False

        self.repo.put_blob(data)
        self.stage_addition(path, sha1)
        return True

    def remove_file(self, path: str) -> None:
        """
        Unstage a file and, if HEAD tracks it, stage its removal.

        A tracked file is also deleted from the working directory.

        Raises:
            NothingToRemove: If the file is neither staged nor tracked
        """
        head_tree = self.repo.refs.head_commit().tree
        staged = path in self.additions
        tracked = path in head_tree

        if not staged and not tracked:
            raise NothingToRemove()

        if staged:
            self.cancel_addition(path)

        if tracked:
            self.stage_removal(path, head_tree[path])
            self.repo.worktree.delete(path)

    def is_empty(self) -> bool:
        return not self.additions and not self.removals

    def clear(self) -> None:
        """Drop every pending addition and removal."""
        for path in list(self.additions):
            self.cancel_addition(path)
        for path in list(self.removals):
            self.cancel_removal(path)

    def __len__(self) -> int:
        """Number of staged changes."""
        return len(self.additions) + len(self.removals)

    def __repr__(self) -> str:
        """String representation."""
        return f"StagingArea(additions={len(self.additions)}, removals={len(self.removals)})"
