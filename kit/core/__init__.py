"""Core functionality for Kit.

This module contains the core data structures:
- Kit objects (Blob, Commit)
- Repository and object store
- Staging area
- Reference management
- Working tree access
- Configuration management
- Hashing utilities
- The error hierarchy

For commit, checkout, merge, status and log, see kit.operations
For push, fetch and pull, see kit.remote
"""

from kit.core.objects import KitObject, Blob, Commit
from kit.core.repository import Repository
from kit.core.hash import hash_object, hash_file
from kit.core.index import StagingArea
from kit.core.refs import RefManager
from kit.core.worktree import WorkingTree
from kit.core.config import Config, get_config
from kit.core.errors import KitError

__all__ = [
    'KitObject',
    'Blob',
    'Commit',
    'Repository',
    'StagingArea',
    'RefManager',
    'WorkingTree',
    'Config',
    'get_config',
    'KitError',
    'hash_object',
    'hash_file',
]
