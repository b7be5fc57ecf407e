"""Merge operations for Kit VCS."""

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Optional, List, Set

from kit.core.errors import NoSuchBranch, SelfMerge, UncommittedChanges
from kit.operations.checkout import Navigator
from kit.operations.commit import CommitEngine

logger = logging.getLogger(__name__)

ALREADY_MERGED = 'already-merged'
FAST_FORWARD = 'fast-forward'
MERGED = 'merged'

CONFLICT_HEAD = b'<<<<<<< HEAD\n'
CONFLICT_SEP = b'=======\n'
CONFLICT_END = b'>>>>>>>\n'


@dataclass
class MergeResult:
    """Result of a merge operation."""
    outcome: str
    split_point: str
    conflicts: List[str] = field(default_factory=list)
    commit_hash: Optional[str] = None

    @property
    def is_fast_forward(self) -> bool:
        return self.outcome == FAST_FORWARD

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)

    def __repr__(self) -> str:
        """String representation."""
        return f"MergeResult({self.outcome}, conflicts={len(self.conflicts)})"


def conflict_bytes(head: Optional[bytes], other: Optional[bytes]) -> bytes:
    """Build the contents of a conflicted file; an absent side is empty."""
    return CONFLICT_HEAD + (head or b'') + CONFLICT_SEP + (other or b'') + CONFLICT_END


class MergeEngine:
    """
    Handles merge operations for Kit VCS.

    Supports:
    - Split point discovery across parent and branch-parent edges
    - Fast-forward merges
    - Three-way merges on whole blobs with conflict markers
    """

    def __init__(self, repo):
        """
        Initialize merge engine.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def get_ancestors(self, commit_hash: str) -> Set[str]:
        """
        Get a commit and all of its ancestors.

        Both parent edges are followed, so commits reachable only through
        a merge's branch parent are included.

        Args:
            commit_hash: Starting commit hash

        Returns:
            Set of commit hashes, including commit_hash itself
        """
        ancestors = set()
        stack = [commit_hash]

        while stack:
            current = stack.pop()
            if current in ancestors:
                continue
            ancestors.add(current)
            stack.extend(self.repo.get_commit(current).parents)

        return ancestors

    def find_split_point(self, head_hash: str, other_hash: str) -> Optional[str]:
        """
        Find the latest common ancestor of two commits.

        Walks breadth-first from head_hash, primary parent before branch
        parent, and returns the first commit that is also an ancestor of
        other_hash.

        Args:
            head_hash: Current branch commit
            other_hash: Commit being merged in

        Returns:
            Hash of the split point, or None if histories are unrelated
        """
        other_ancestors = self.get_ancestors(other_hash)
        queue = deque([head_hash])
        seen = {head_hash}

        while queue:
            current = queue.popleft()
            if current in other_ancestors:
                return current
            for parent in self.repo.get_commit(current).parents:
                if parent not in seen:
                    seen.add(parent)
                    queue.append(parent)

        return None

    def merge(self, branch_name: str) -> MergeResult:
        """
        Merge a branch into the current branch.

        Args:
            branch_name: Branch to merge in

        Returns:
            MergeResult describing what happened

        Raises:
            NoSuchBranch: If the branch doesn't exist
            SelfMerge: If branch_name is the current branch
            UncommittedChanges: If the staging area is not empty
            UntrackedConflict: If an untracked file would be overwritten
        """
        refs = self.repo.refs
        other_hash = refs.read_branch(branch_name)
        if other_hash is None:
            raise NoSuchBranch("A branch with that name does not exist.")
        if branch_name == refs.get_current_branch():
            raise SelfMerge()
        if not self.repo.staging.is_empty():
            raise UncommittedChanges()

        head_hash = refs.head_commit_hash()
        split_hash = self.find_split_point(head_hash, other_hash)
        logger.debug("Split point of %s and %s is %s", head_hash, other_hash, split_hash)

        if split_hash == other_hash:
            return MergeResult(ALREADY_MERGED, split_hash)

        navigator = Navigator(self.repo)
        if split_hash == head_hash:
            # The current branch moves; HEAD keeps naming it
            navigator.reset(other_hash)
            return MergeResult(FAST_FORWARD, split_hash)

        other = self.repo.get_commit(other_hash)
        navigator.check_untracked(other)

        head = self.repo.get_commit(head_hash)
        split_tree = self.repo.get_commit(split_hash).tree if split_hash else {}
        conflicts = self._merge_trees(split_tree, head.tree, other.tree)

        commit_hash = CommitEngine(self.repo).merge_commit(branch_name, other_hash)
        return MergeResult(MERGED, split_hash, conflicts, commit_hash)

    def _merge_trees(self, split: dict, head: dict, other: dict) -> List[str]:
        """
        Apply the three-way merge to the working tree and staging area.

        Returns:
            Sorted list of conflicted paths
        """
        worktree = self.repo.worktree
        staging = self.repo.staging
        conflicts = []

        for path in sorted(set(split) | set(head) | set(other)):
            s, h, o = split.get(path), head.get(path), other.get(path)

            if h == o or o == s:
                # Unchanged on the other side, or changed identically
                continue

            if h == s:
                if o is None:
                    worktree.delete(path)
                    staging.stage_removal(path, h)
                else:
                    worktree.write(path, self.repo.get_blob(o))
                    staging.stage_addition(path, o)
                logger.debug("Merge took other side of %s", path)
                continue

            head_data = self.repo.get_blob(h) if h else None
            other_data = self.repo.get_blob(o) if o else None
            data = conflict_bytes(head_data, other_data)
            worktree.write(path, data)
            staging.stage_addition(path, self.repo.put_blob(data))
            conflicts.append(path)
            logger.debug("Merge conflict in %s", path)

        return conflicts
