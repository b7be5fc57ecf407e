"""Commit creation for Kit VCS."""

import logging
from typing import Optional
from kit.core.errors import EmptyMessage, NoChanges
from kit.core.objects import Commit

logger = logging.getLogger(__name__)


class CommitEngine:
    """
    Turns the staging area into commits.

    The new tree is HEAD's tree overlaid with the staged additions, minus
    the staged removals. The commit is persisted before the current
    branch moves, and staging is cleared last.
    """

    def __init__(self, repo):
        self.repo = repo

    def build_tree(self, head: Commit) -> dict:
        """Apply staged additions and removals to HEAD's tree."""
        staging = self.repo.staging
        tree = dict(head.tree)
        tree.update(staging.additions)
        for path in staging.removals:
            tree.pop(path, None)
        return tree

    def commit(self, message: str) -> str:
        """
        Create a commit from the staging area.

        Args:
            message: Commit message

        Returns:
            str: Hash of the new commit

        Raises:
            EmptyMessage: If message is empty
            NoChanges: If nothing is staged
        """
        if not message:
            raise EmptyMessage()

        if self.repo.staging.is_empty():
            raise NoChanges()

        return self._record(message)

    def merge_commit(self, other_branch: str, other_hash: str) -> str:
        """
        Record a merge of other_branch into the current branch.

        A merge commit is written even when the merge staged nothing, since
        the second parent alone changes history.

        Args:
            other_branch: Name of the merged-in branch
            other_hash: Commit hash of that branch

        Returns:
            str: Hash of the two-parent merge commit
        """
        current = self.repo.refs.get_current_branch()
        message = f"Merged {other_branch} into {current}."
        return self._record(message, branch_parent=other_hash)

    def _record(self, message: str, branch_parent: Optional[str] = None) -> str:
        head = self.repo.refs.head_commit()
        commit = Commit.create(
            message=message,
            tree=self.build_tree(head),
            parent=head,
            branch_parent=branch_parent,
        )

        commit_hash = self.repo.put_commit(commit)
        self.repo.refs.advance_head(commit_hash)
        self.repo.staging.clear()

        logger.debug("Committed %s on %s", commit_hash,
                     self.repo.refs.get_current_branch())
        return commit_hash
