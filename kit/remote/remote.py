"""Remote repository operations for Kit VCS."""

import logging
import shutil
from pathlib import Path
from typing import Dict, Iterable, Optional

from kit.core.errors import (
    NoSuchRemote, NoSuchRemoteBranch, NotInitialized, PushNotFastForward,
    RemoteExists, RemoteMissing,
)
from kit.core.repository import Repository
from kit.operations.merge import MergeResult

logger = logging.getLogger(__name__)


class RemoteManager:
    """
    Manages remote repository operations.

    A remote is another Kit repository on the local file system, named in
    this repository's config as a `[remote "<name>"]` section. Its path
    may point at the other working directory or at its .kit directory.
    """

    def __init__(self, repo: Repository):
        """Initialize remote manager."""
        self.repo = repo

    @staticmethod
    def _section(name: str) -> str:
        return f'remote "{name}"'

    def add_remote(self, name: str, path: str) -> None:
        """
        Register a remote.

        Args:
            name: Remote name (e.g., 'origin')
            path: Path to the remote repository

        Raises:
            RemoteExists: If a remote with that name is registered
        """
        if name in self.list_remotes():
            raise RemoteExists()
        self.repo.config.set(self._section(name), 'path', path)
        logger.debug("Added remote %s -> %s", name, path)

    def remove_remote(self, name: str) -> None:
        """
        Unregister a remote.

        Raises:
            NoSuchRemote: If no remote with that name is registered
        """
        if not self.repo.config.remove_section(self._section(name)):
            raise NoSuchRemote()
        logger.debug("Removed remote %s", name)

    def list_remotes(self) -> Dict[str, str]:
        """
        List all configured remotes.

        Returns:
            Dict mapping remote names to paths, sorted by name
        """
        remotes = {}
        config = self.repo.config
        for section in config.sections('remote "'):
            if section.endswith('"'):
                name = section[8:-1]  # Extract name from 'remote "name"'
                remotes[name] = config.repo_file.get(section, 'path', fallback='')
        return dict(sorted(remotes.items()))

    def get_remote_path(self, name: str) -> Optional[str]:
        """Get the registered path of a remote."""
        return self.list_remotes().get(name)

    def open_remote(self, name: str) -> Repository:
        """
        Open the repository a remote points at.

        Relative paths are taken from this repository's working tree.

        Raises:
            RemoteMissing: If the remote is unknown or its path holds no repository
        """
        path = self.get_remote_path(name)
        if path is None:
            raise RemoteMissing()

        location = Path(path)
        if not location.is_absolute():
            location = self.repo.work_tree / location

        if not location.exists():
            raise RemoteMissing()
        try:
            return Repository.open(location)
        except NotInitialized:
            raise RemoteMissing()

    def _copy_objects(self, source: Repository, dest: Repository,
                      commits: Iterable[str], blobs: Iterable[str]) -> int:
        """Copy object files that dest lacks; returns how many were copied."""
        copied = 0
        pairs = [(source.commit_path(h), dest.commit_path(h)) for h in commits]
        pairs += [(source.blob_path(h), dest.blob_path(h)) for h in blobs]

        for src_file, dest_file in pairs:
            if dest_file.exists():
                continue
            dest_file.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src_file, dest_file)
            copied += 1

        return copied

    def push(self, remote_name: str, branch: str) -> str:
        """
        Push the current branch's commit to a branch of a remote.

        A missing remote branch is treated as sitting at the remote's HEAD
        commit. Either way that commit must be an ancestor of the local
        HEAD, and nothing in the remote changes unless it is.

        Args:
            remote_name: Name of remote to push to
            branch: Branch to update in the remote

        Returns:
            str: The commit hash the remote branch now points at

        Raises:
            RemoteMissing: If the remote repository can't be found
            BadBranchName: If the remote can't store a branch of that name
            PushNotFastForward: If the remote branch has commits we don't
        """
        remote = self.open_remote(remote_name)
        remote_refs = remote.refs

        remote_refs.check_name(branch)
        remote_hash = remote_refs.read_branch(branch)
        if remote_hash is None:
            remote_hash = remote_refs.head_commit_hash()

        head_hash = self.repo.refs.head_commit_hash()
        if remote_hash not in self.repo.merge.get_ancestors(head_hash):
            raise PushNotFastForward()

        copied = self._copy_objects(
            self.repo, remote, self.repo.list_commits(), self.repo.list_blobs()
        )
        remote_refs.write_branch(branch, head_hash)

        logger.debug("Pushed %s to %s/%s (%d objects copied)",
                     head_hash, remote_name, branch, copied)
        return head_hash

    def fetch(self, remote_name: str, branch: str) -> str:
        """
        Copy a remote branch's history into this repository.

        The fetched commit is recorded as the local branch
        '<remote_name>/<branch>'.

        Args:
            remote_name: Name of remote to fetch from
            branch: Branch to fetch

        Returns:
            str: Hash of the fetched commit

        Raises:
            RemoteMissing: If the remote repository can't be found
            NoSuchRemoteBranch: If the remote doesn't have the branch
            BadBranchName: If '<remote_name>/<branch>' clashes with a local branch
        """
        remote = self.open_remote(remote_name)
        remote_hash = remote.refs.read_branch(branch)
        if remote_hash is None:
            raise NoSuchRemoteBranch()

        local_name = f"{remote_name}/{branch}"
        self.repo.refs.check_name(local_name)

        commits = sorted(remote.merge.get_ancestors(remote_hash))
        blobs = set()
        for commit_hash in commits:
            blobs.update(remote.get_commit(commit_hash).tree.values())

        copied = self._copy_objects(remote, self.repo, commits, sorted(blobs))
        self.repo.refs.write_branch(local_name, remote_hash)

        logger.debug("Fetched %s/%s at %s (%d objects copied)",
                     remote_name, branch, remote_hash, copied)
        return remote_hash

    def pull(self, remote_name: str, branch: str) -> MergeResult:
        """
        Fetch a remote branch and merge it into the current branch.

        Returns:
            MergeResult of merging '<remote_name>/<branch>'
        """
        self.fetch(remote_name, branch)
        return self.repo.merge.merge(f"{remote_name}/{branch}")
