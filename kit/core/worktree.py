"""Working directory access for Kit."""

import logging
from pathlib import Path
from typing import Dict, Optional
from .hash import hash_file

logger = logging.getLogger(__name__)


class WorkingTree:
    """
    Reads and writes files in the repository's working directory.

    Paths are always relative to the working tree root and use '/' as
    separator. Everything under the .kit directory is left out of
    listings; other dotfiles are ordinary files.
    """

    def __init__(self, repo):
        self.repo = repo
        self.root: Path = repo.work_tree
        self.kit_name = repo.kit_dir.name

    def path(self, rel_path: str) -> Path:
        return self.root / rel_path

    def exists(self, rel_path: str) -> bool:
        return self.path(rel_path).is_file()

    def read(self, rel_path: str) -> Optional[bytes]:
        """Return file bytes, or None if the file is absent."""
        file_path = self.path(rel_path)
        if not file_path.is_file():
            return None
        return file_path.read_bytes()

    def write(self, rel_path: str, data: bytes) -> None:
        file_path = self.path(rel_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_bytes(data)
        logger.debug("Wrote working file %s", rel_path)

    def delete(self, rel_path: str) -> bool:
        """Delete a working file; returns False if it was not there."""
        file_path = self.path(rel_path)
        if not file_path.is_file():
            return False
        file_path.unlink()
        logger.debug("Deleted working file %s", rel_path)
        return True

    def hash_of(self, rel_path: str) -> Optional[str]:
        file_path = self.path(rel_path)
        return hash_file(file_path) if file_path.is_file() else None

    def list_files(self) -> Dict[str, str]:
        """
        Get all plain files in the working directory with their blob hashes.

        Returns:
            Dict mapping relative path to SHA-1 of the file content
        """
        files = {}

        for path in self.root.rglob('*'):
            rel_path = path.relative_to(self.root)
            if rel_path.parts[0] == self.kit_name:
                continue
            if path.is_file() and not path.is_symlink():
                files[rel_path.as_posix()] = hash_file(path)

        return dict(sorted(files.items()))

    def materialize(self, tree: Dict[str, str]) -> None:
        """Write every file of a commit tree into the working directory."""
        for rel_path, blob_hash in sorted(tree.items()):
            self.write(rel_path, self.repo.get_blob(blob_hash))
