"""Kit objects for Kit."""

import time
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, Optional
from .hash import hash_object

INITIAL_MESSAGE = 'initial commit'


class KitObject(ABC):
    """Base class for all Kit objects."""

    def __init__(self):
        self._hash: Optional[str] = None

    @abstractmethod
    def serialize(self) -> bytes:
        """
        Serialize object to bytes.

        Returns:
            bytes: Serialized object data
        """
        pass

    @abstractmethod
    def deserialize(self, data: bytes) -> None:
        """
        Deserialize object from bytes.

        Args:
            data: Serialized object data
        """
        pass

    @property
    def type(self) -> str:
        """
        Return object type name.

        Returns:
            str: Object type (blob, commit)
        """
        return self.__class__.__name__.lower()

    def compute_hash(self) -> str:
        """
        Compute and cache object hash.

        The hash covers the serialized form only, so a blob's hash is the
        SHA-1 of the raw file bytes.

        Returns:
            str: 40-character SHA-1 hash
        """
        if self._hash is None:
            self._hash = hash_object(self.serialize())
        return self._hash

    @property
    def hash(self) -> str:
        """
        Get object hash.

        Returns:
            str: 40-character SHA-1 hash
        """
        return self.compute_hash()


class Blob(KitObject):
    """
    Represents file content.

    A blob stores the raw content of a file without any metadata
    like filename or permissions.
    """

    def __init__(self, data: Optional[bytes] = None):
        """
        Initialize a blob.

        Args:
            data: File content as bytes
        """
        super().__init__()
        self.data = data or b''

    def serialize(self) -> bytes:
        return self.data

    def deserialize(self, data: bytes) -> None:
        self.data = data
        self._hash = None

    @classmethod
    def from_file(cls, filepath) -> 'Blob':
        """
        Create blob from file.

        Args:
            filepath: Path to file

        Returns:
            Blob: New blob containing file content
        """
        with open(filepath, 'rb') as f:
            return cls(f.read())

    def __repr__(self) -> str:
        """String representation of blob."""
        return f"Blob(hash={self.hash[:7]}, size={len(self.data)})"


class Commit(KitObject):
    """
    Represents a snapshot of the tracked files.

    A commit captures:
    - The full tree (path -> blob hash), not a delta
    - Parent commit hash, and a second parent for merges
    - Timestamp and timezone
    - Commit message
    """

    def __init__(self):
        """Initialize empty commit."""
        super().__init__()
        self.message: str = ''
        self.timestamp: int = 0
        self.timezone: str = '+0000'
        self.tree: Dict[str, str] = {}
        self.parent: Optional[str] = None
        self.branch_parent: Optional[str] = None

    @property
    def parents(self) -> list:
        """Parent hashes, primary parent first."""
        return [p for p in (self.parent, self.branch_parent) if p]

    @property
    def is_merge(self) -> bool:
        return self.branch_parent is not None

    def serialize(self) -> bytes:
        """
        Serialize commit to its canonical form.

        Format:
        parent <parent-hash>          (omitted for the initial commit)
        branch-parent <parent-hash>   (merge commits only)
        timestamp <seconds> <timezone>
        file <blob-hash> <path>       (sorted by path)

        <commit message>

        Returns:
            bytes: Serialized commit data
        """
        lines = []

        if self.parent:
            lines.append(f'parent {self.parent}')
        if self.branch_parent:
            lines.append(f'branch-parent {self.branch_parent}')

        lines.append(f'timestamp {self.timestamp} {self.timezone}')

        for path in sorted(self.tree):
            lines.append(f'file {self.tree[path]} {path}')

        lines.append('')
        lines.append(self.message)

        return '\n'.join(lines).encode()

    def deserialize(self, data: bytes) -> None:
        """
        Deserialize commit from canonical form.

        Args:
            data: Serialized commit data
        """
        lines = data.decode().split('\n')

        self.tree = {}
        self.parent = None
        self.branch_parent = None

        message_start = len(lines)
        for i, line in enumerate(lines):
            if not line:
                message_start = i + 1
                break

            if line.startswith('parent '):
                self.parent = line[7:]

            elif line.startswith('branch-parent '):
                self.branch_parent = line[14:]

            elif line.startswith('timestamp '):
                seconds, timezone = line[10:].split(' ', 1)
                self.timestamp = int(seconds)
                self.timezone = timezone

            elif line.startswith('file '):
                blob_hash, path = line[5:].split(' ', 1)
                self.tree[path] = blob_hash

        self.message = '\n'.join(lines[message_start:])
        self._hash = None

    @classmethod
    def create(
        cls,
        message: str,
        tree: Dict[str, str],
        parent: Optional['Commit'] = None,
        branch_parent: Optional[str] = None,
        timestamp: Optional[int] = None,
        timezone: Optional[str] = None
    ) -> 'Commit':
        """
        Create a new commit.

        The timestamp never goes backwards relative to the parent, so a
        skewed clock cannot produce a child older than its parent.

        Args:
            message: Commit message
            tree: Mapping of path to blob hash
            parent: Primary parent commit object
            branch_parent: Hash of the merged-in commit
            timestamp: Unix timestamp (defaults to current time)
            timezone: Timezone offset (defaults to local offset)

        Returns:
            Commit: New commit object
        """
        commit = cls()
        commit.message = message
        commit.tree = dict(tree)
        commit.parent = parent.hash if parent else None
        commit.branch_parent = branch_parent

        if timestamp is None:
            timestamp = int(time.time())
        if parent is not None:
            timestamp = max(timestamp, parent.timestamp)

        if timezone is None:
            timezone = datetime.now().astimezone().strftime('%z') or '+0000'

        commit.timestamp = timestamp
        commit.timezone = timezone

        return commit

    @classmethod
    def initial(cls) -> 'Commit':
        """
        Create the bootstrap commit.

        It has no parents, an empty tree and the epoch as timestamp, so
        every fresh repository starts from the same commit hash.
        """
        return cls.create(INITIAL_MESSAGE, {}, timestamp=0, timezone='+0000')

    def __repr__(self) -> str:
        """String representation."""
        parent_info = f", parents={len(self.parents)}" if self.parents else ""
        msg_preview = self.message.split('\n')[0][:50]
        return f"Commit(hash={self.hash[:7]}{parent_info}, msg='{msg_preview}')"
