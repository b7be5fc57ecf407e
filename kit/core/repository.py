"""Repository management for Kit VCS."""

import logging
import zlib
from pathlib import Path
from typing import List, Optional
from .errors import AlreadyInitialized, NotInitialized, ObjectNotFound
from .objects import KitObject, Blob, Commit

logger = logging.getLogger(__name__)

KIT_DIR = '.kit'
DEFAULT_BRANCH = 'master'


class Repository:
    """
    Represents a Kit repository.

    A repository manages the .kit directory structure and doubles as the
    object store: blobs and commits are written once, keyed by hash, and
    never modified or deleted.
    """

    def __init__(self, path: str = '.'):
        """
        Initialize repository.

        Args:
            path: Path to repository root (defaults to current directory)
        """
        self.work_tree = Path(path).resolve()
        self.kit_dir = self.work_tree / KIT_DIR
        self.blobs_dir = self.kit_dir / 'blobs'
        self.commits_dir = self.kit_dir / 'commits'
        self.staging_dir = self.kit_dir / 'staging'
        self.additions_dir = self.staging_dir / 'additions'
        self.removals_dir = self.staging_dir / 'removals'
        self.refs_dir = self.kit_dir / 'refs'
        self.heads_dir = self.refs_dir / 'heads'
        self.head_file = self.kit_dir / 'HEAD'
        self.config_file = self.kit_dir / 'config'

        # Managers are created lazily to avoid circular imports
        self._ref_manager = None
        self._staging = None
        self._worktree = None
        self._config = None
        self._merge_engine = None
        self._remote_manager = None

    @property
    def refs(self):
        """Get RefManager instance."""
        if self._ref_manager is None:
            from .refs import RefManager
            self._ref_manager = RefManager(self)
        return self._ref_manager

    @property
    def staging(self):
        """Get StagingArea instance."""
        if self._staging is None:
            from .index import StagingArea
            self._staging = StagingArea(self)
        return self._staging

    @property
    def worktree(self):
        """Get WorkingTree instance."""
        if self._worktree is None:
            from .worktree import WorkingTree
            self._worktree = WorkingTree(self)
        return self._worktree

    @property
    def config(self):
        """Get Config instance for this repository."""
        if self._config is None:
            from .config import get_config
            self._config = get_config(self)
        return self._config

    @property
    def merge(self):
        """Get MergeEngine instance."""
        if self._merge_engine is None:
            from kit.operations.merge import MergeEngine
            self._merge_engine = MergeEngine(self)
        return self._merge_engine

    @property
    def remote(self):
        """Get RemoteManager instance."""
        if self._remote_manager is None:
            from kit.remote.remote import RemoteManager
            self._remote_manager = RemoteManager(self)
        return self._remote_manager

    def exists(self) -> bool:
        return self.kit_dir.is_dir()

    def init(self) -> 'Repository':
        """
        Initialize a new repository.

        Creates the .kit directory structure:
        .kit/
        ├── blobs/           # File contents
        ├── commits/         # Commit objects
        ├── staging/
        │   ├── additions/   # Files staged for addition
        │   └── removals/    # Files staged for removal
        ├── refs/heads/      # Branch references
        ├── HEAD             # Current branch
        └── config           # Repository configuration and remotes

        A bootstrap commit with an empty tree is recorded and 'master'
        points at it.

        Returns:
            Repository: self for method chaining

        Raises:
            AlreadyInitialized: If repository already exists
        """
        if self.kit_dir.exists():
            raise AlreadyInitialized()

        self.kit_dir.mkdir(parents=True)
        self.blobs_dir.mkdir()
        self.commits_dir.mkdir()
        self.staging_dir.mkdir()
        self.additions_dir.mkdir()
        self.removals_dir.mkdir()
        self.refs_dir.mkdir()
        self.heads_dir.mkdir()

        config_content = '[core]\nrepositoryformatversion = 0\n'
        self.config_file.write_text(config_content)

        initial_hash = self.put_commit(Commit.initial())
        self.refs.write_branch(DEFAULT_BRANCH, initial_hash)
        self.head_file.write_text(f'ref: refs/heads/{DEFAULT_BRANCH}\n')

        logger.debug("Initialized repository at %s (initial commit %s)",
                     self.kit_dir, initial_hash)
        return self

    @classmethod
    def find_repository(cls, path: str = '.') -> Optional['Repository']:
        """
        Find repository by searching up the directory tree.

        Searches from the given path upwards until it finds a .kit directory
        or reaches the filesystem root.

        Args:
            path: Starting path for search

        Returns:
            Repository if found, None otherwise
        """
        current = Path(path).resolve()

        while True:
            if (current / KIT_DIR).is_dir():
                return cls(str(current))

            # Reached filesystem root
            if current == current.parent:
                return None

            current = current.parent

    @classmethod
    def open(cls, path) -> 'Repository':
        """
        Open an existing repository at path.

        The path may name either the working directory or its .kit
        directory.

        Raises:
            NotInitialized: If no repository lives at path
        """
        path = Path(path).resolve()
        if path.name == KIT_DIR and path.is_dir():
            path = path.parent
        repo = cls(str(path))
        if not repo.exists():
            raise NotInitialized()
        return repo

    def _object_path(self, base: Path, hash: str) -> Path:
        """
        Get filesystem path for an object.

        Objects are stored in subdirectories named by the first 2 characters
        of the hash, with the remaining 38 characters as the filename.
        """
        return base / hash[:2] / hash[2:]

    def blob_path(self, hash: str) -> Path:
        return self._object_path(self.blobs_dir, hash)

    def commit_path(self, hash: str) -> Path:
        return self._object_path(self.commits_dir, hash)

    def write_object(self, obj: KitObject) -> str:
        """
        Write object to repository.

        Objects are stored compressed with zlib. The format is:
        <type> <size>\\0<content>

        Writing an object that already exists is a no-op.

        Args:
            obj: Kit object to write

        Returns:
            str: SHA-1 hash of the object
        """
        hash = obj.hash
        base = self.commits_dir if isinstance(obj, Commit) else self.blobs_dir
        path = self._object_path(base, hash)

        if path.exists():
            return hash

        data = obj.serialize()
        header = f"{obj.type} {len(data)}\0".encode()

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(zlib.compress(header + data))

        logger.debug("Wrote %s %s (%d bytes)", obj.type, hash, len(data))
        return hash

    def read_object(self, hash: str, kind: str) -> KitObject:
        """
        Read object from repository.

        Args:
            hash: 40-character SHA-1 hash
            kind: 'blob' or 'commit'

        Returns:
            KitObject: Deserialized Blob or Commit

        Raises:
            ObjectNotFound: If object not found
            ValueError: If the stored object is corrupt
        """
        base = self.commits_dir if kind == 'commit' else self.blobs_dir
        path = self._object_path(base, hash)

        if len(hash) < 3 or not path.is_file():
            raise ObjectNotFound(kind, hash)

        content = zlib.decompress(path.read_bytes())

        # Parse header: <type> <size>\0
        null_idx = content.index(b'\0')
        header = content[:null_idx].decode()
        data = content[null_idx + 1:]

        try:
            obj_type, size_str = header.split(' ', 1)
            size = int(size_str)
        except ValueError:
            raise ValueError(f"Invalid object header: {header}")

        if obj_type != kind:
            raise ValueError(f"Object {hash} is a {obj_type}, expected {kind}")
        if len(data) != size:
            raise ValueError(f"Object size mismatch: expected {size}, got {len(data)}")

        obj = Commit() if kind == 'commit' else Blob()
        obj.deserialize(data)
        return obj

    def put_blob(self, data: bytes) -> str:
        """Store file content and return its hash."""
        return self.write_object(Blob(data))

    def get_blob(self, hash: str) -> bytes:
        """Return the content stored under hash."""
        return self.read_object(hash, 'blob').data

    def put_commit(self, commit: Commit) -> str:
        """Store a commit and return its hash."""
        return self.write_object(commit)

    def get_commit(self, hash: str) -> Commit:
        """Return the commit stored under hash."""
        return self.read_object(hash, 'commit')

    def has_blob(self, hash: str) -> bool:
        return self.blob_path(hash).is_file()

    def has_commit(self, hash: str) -> bool:
        return self.commit_path(hash).is_file()

    def list_commits(self) -> List[str]:
        """
        List every commit in the store.

        Returns:
            Sorted list of commit hashes
        """
        return self._list_objects(self.commits_dir)

    def list_blobs(self) -> List[str]:
        return self._list_objects(self.blobs_dir)

    def _list_objects(self, base: Path) -> List[str]:
        hashes = []
        if not base.exists():
            return hashes

        for subdir in base.iterdir():
            if subdir.is_dir() and len(subdir.name) == 2:
                for obj_file in subdir.iterdir():
                    if obj_file.is_file():
                        hashes.append(subdir.name + obj_file.name)

        return sorted(hashes)

    def resolve_prefix(self, prefix: str) -> Optional[str]:
        """
        Resolve an abbreviated commit hash.

        A full hash that exists wins. Otherwise the first stored commit, in
        sorted order, whose hash starts with prefix is returned.

        Args:
            prefix: One or more leading hex characters

        Returns:
            Full commit hash, or None if nothing matches
        """
        if not prefix:
            return None

        prefix = prefix.lower()
        if self.has_commit(prefix):
            return prefix

        if len(prefix) >= 2:
            subdir = self.commits_dir / prefix[:2]
            candidates = []
            if subdir.is_dir():
                candidates = sorted(prefix[:2] + f.name for f in subdir.iterdir())
        else:
            candidates = self.list_commits()

        for full_hash in candidates:
            if full_hash.startswith(prefix):
                return full_hash

        return None

    def __repr__(self) -> str:
        """String representation of repository."""
        return f"Repository(path={self.work_tree})"
