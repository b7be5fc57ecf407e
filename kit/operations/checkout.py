"""Checkout, reset and branch management for Kit VCS."""

import logging
from kit.core.errors import (
    AlreadyOnBranch, BranchExists, CannotRemoveCurrent, NoSuchBranch,
    NoSuchCommit, NotInCommit, UntrackedConflict,
)
from kit.core.objects import Commit

logger = logging.getLogger(__name__)


class Navigator:
    """
    Moves the working tree and HEAD between commits.

    Every operation validates its arguments and the working tree before
    touching any file, so a refused checkout leaves everything as it was.
    """

    def __init__(self, repo):
        """
        Initialize navigator.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def _resolve(self, commit_prefix: str) -> Commit:
        commit_hash = self.repo.resolve_prefix(commit_prefix)
        if commit_hash is None:
            raise NoSuchCommit()
        return self.repo.get_commit(commit_hash)

    def _restore(self, commit: Commit, path: str) -> None:
        if path not in commit.tree:
            raise NotInCommit()
        self.repo.worktree.write(path, self.repo.get_blob(commit.tree[path]))

    def checkout_file(self, path: str) -> None:
        """
        Restore a file to its version in HEAD.

        Raises:
            NotInCommit: If HEAD does not track path
        """
        self._restore(self.repo.refs.head_commit(), path)

    def checkout_file_at(self, commit_prefix: str, path: str) -> None:
        """
        Restore a file to its version in the given commit.

        Args:
            commit_prefix: Full or abbreviated commit hash
            path: File path relative to the working tree

        Raises:
            NoSuchCommit: If the prefix matches no commit
            NotInCommit: If that commit does not track path
        """
        self._restore(self._resolve(commit_prefix), path)

    def check_untracked(self, target: Commit) -> None:
        """
        Refuse to overwrite working files HEAD does not track.

        Raises:
            UntrackedConflict: If a file of target's tree exists in the
                working directory but is untracked in HEAD
        """
        head_tree = self.repo.refs.head_commit().tree
        worktree = self.repo.worktree
        for path in sorted(target.tree):
            if path not in head_tree and worktree.exists(path):
                raise UntrackedConflict(path)

    def _switch_tree(self, target: Commit) -> None:
        """Replace the files tracked by HEAD with those of target."""
        head_tree = self.repo.refs.head_commit().tree
        worktree = self.repo.worktree

        worktree.materialize(target.tree)
        for path in sorted(head_tree):
            if path not in target.tree:
                worktree.delete(path)

    def checkout_branch(self, name: str) -> None:
        """
        Make name the current branch and check out its commit.

        Raises:
            NoSuchBranch: If the branch doesn't exist
            AlreadyOnBranch: If name is already the current branch
            UntrackedConflict: If an untracked file would be overwritten
        """
        refs = self.repo.refs
        target_hash = refs.read_branch(name)
        if target_hash is None:
            raise NoSuchBranch()
        if name == refs.get_current_branch():
            raise AlreadyOnBranch()

        if target_hash != refs.head_commit_hash():
            target = self.repo.get_commit(target_hash)
            self.check_untracked(target)
            self._switch_tree(target)

        refs.set_head(name)
        self.repo.staging.clear()
        logger.debug("Checked out branch %s at %s", name, target_hash)

    def reset(self, commit_prefix: str) -> None:
        """
        Check out an arbitrary commit and move the current branch to it.

        Raises:
            NoSuchCommit: If the prefix matches no commit
            UntrackedConflict: If an untracked file would be overwritten
        """
        target = self._resolve(commit_prefix)
        self.check_untracked(target)
        self._switch_tree(target)
        self.repo.refs.advance_head(target.hash)
        self.repo.staging.clear()
        logger.debug("Reset %s to %s", self.repo.refs.get_current_branch(), target.hash)

    def create_branch(self, name: str) -> None:
        """
        Create a branch pointing at HEAD's commit.

        Raises:
            BranchExists: If the branch already exists
            BadBranchName: If the name is malformed or clashes with a branch
        """
        refs = self.repo.refs
        if refs.branch_exists(name):
            raise BranchExists()
        refs.write_branch(name, refs.head_commit_hash())

    def remove_branch(self, name: str) -> None:
        """
        Delete a branch pointer; its commits stay in the store.

        Raises:
            NoSuchBranch: If the branch doesn't exist
            CannotRemoveCurrent: If name is the current branch
        """
        refs = self.repo.refs
        if not refs.branch_exists(name):
            raise NoSuchBranch("A branch with that name does not exist.")
        if name == refs.get_current_branch():
            raise CannotRemoveCurrent()
        refs.delete_branch(name)
