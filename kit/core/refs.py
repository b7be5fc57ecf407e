"""Reference management for Kit VCS."""

import logging
from typing import Dict, Optional
from kit.core.errors import BadBranchName, NoSuchBranch, ObjectNotFound
from kit.core.objects import Commit

logger = logging.getLogger(__name__)


class RefManager:
    """
    Manages Kit references (branches and HEAD).

    Handles:
    - Branch references (refs/heads/*), one file per branch
    - The symbolic HEAD reference naming the current branch

    Branch names may contain '/', as fetched branches do
    ('origin/master'); such names are stored in subdirectories, so
    'origin' and 'origin/master' cannot both exist.
    """

    def __init__(self, repo):
        """
        Initialize reference manager.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.kit_dir = repo.kit_dir
        self.heads_dir = repo.heads_dir
        self.head_file = repo.head_file

    @staticmethod
    def is_valid_name(branch_name: str) -> bool:
        """Names are '/'-separated parts; no part may be empty, '.' or '..'."""
        if not branch_name or '\\' in branch_name:
            return False
        return all(part not in ('', '.', '..') for part in branch_name.split('/'))

    def _branch_path(self, branch_name: str):
        return self.heads_dir / branch_name

    def check_name(self, branch_name: str) -> None:
        """
        Make sure branch_name can be written.

        Raises:
            BadBranchName: If the name is malformed, or a branch file sits
                where its directory would go (or the other way round)
        """
        if not self.is_valid_name(branch_name):
            raise BadBranchName(branch_name)

        branch_path = self._branch_path(branch_name)
        if branch_path.is_dir():
            raise BadBranchName(
                branch_name, f"Branch name '{branch_name}' clashes with existing branches under it.")

        parts = branch_name.split('/')
        for i in range(1, len(parts)):
            prefix = '/'.join(parts[:i])
            if self._branch_path(prefix).is_file():
                raise BadBranchName(
                    branch_name, f"Branch name '{branch_name}' clashes with branch '{prefix}'.")

    def read_branch(self, branch_name: str) -> Optional[str]:
        """
        Read a branch and return its commit hash.

        Args:
            branch_name: Branch name (e.g., 'master', 'origin/master')

        Returns:
            Commit hash or None if the branch doesn't exist
        """
        if not self.branch_exists(branch_name):
            return None
        return self._branch_path(branch_name).read_text().strip()

    def branch_exists(self, branch_name: str) -> bool:
        if not self.is_valid_name(branch_name):
            return False
        return self._branch_path(branch_name).is_file()

    def write_branch(self, branch_name: str, commit_hash: str) -> None:
        """
        Point a branch at a commit, creating it if needed.

        Args:
            branch_name: Branch name
            commit_hash: Commit hash to point to

        Raises:
            BadBranchName: If the name can't be stored
            ObjectNotFound: If the commit is not in the object store
        """
        if not self.repo.has_commit(commit_hash):
            raise ObjectNotFound('commit', commit_hash)
        self.check_name(branch_name)

        branch_path = self._branch_path(branch_name)
        branch_path.parent.mkdir(parents=True, exist_ok=True)
        branch_path.write_text(commit_hash + '\n')
        logger.debug("Branch %s -> %s", branch_name, commit_hash)

    def delete_branch(self, branch_name: str) -> bool:
        """
        Delete a branch.

        Args:
            branch_name: Branch name

        Returns:
            True if deleted, False if not found
        """
        if not self.branch_exists(branch_name):
            return False

        branch_path = self._branch_path(branch_name)
        branch_path.unlink()

        # Drop directories left empty by names like 'origin/master'
        parent = branch_path.parent
        while parent != self.heads_dir and not any(parent.iterdir()):
            parent.rmdir()
            parent = parent.parent

        logger.debug("Deleted branch %s", branch_name)
        return True

    def list_branches(self) -> Dict[str, str]:
        """
        List all branches.

        Returns:
            Dict mapping branch name to commit hash, sorted by name
        """
        if not self.heads_dir.exists():
            return {}

        branches = {}
        for branch_file in self.heads_dir.rglob('*'):
            if branch_file.is_file():
                branch_name = branch_file.relative_to(self.heads_dir).as_posix()
                branches[branch_name] = branch_file.read_text().strip()

        return dict(sorted(branches.items()))

    def get_current_branch(self) -> Optional[str]:
        """
        Get the current branch name.

        Returns:
            Branch name or None if HEAD is missing
        """
        if not self.head_file.exists():
            return None

        content = self.head_file.read_text().strip()
        if content.startswith('ref: refs/heads/'):
            return content[16:]

        return None

    def set_head(self, branch_name: str) -> None:
        """
        Make branch_name the current branch.

        Raises:
            NoSuchBranch: If the branch doesn't exist
        """
        if not self.branch_exists(branch_name):
            raise NoSuchBranch()

        self.head_file.write_text(f'ref: refs/heads/{branch_name}\n')
        logger.debug("HEAD -> %s", branch_name)

    def head_commit_hash(self) -> Optional[str]:
        """Resolve HEAD to a commit hash."""
        branch = self.get_current_branch()
        if branch is None:
            return None
        return self.read_branch(branch)

    def head_commit(self) -> Commit:
        """Return the commit the current branch points at."""
        return self.repo.get_commit(self.head_commit_hash())

    def advance_head(self, commit_hash: str) -> None:
        """Move the current branch to commit_hash."""
        self.write_branch(self.get_current_branch(), commit_hash)
